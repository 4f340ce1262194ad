#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Functions for loading and validating share documents"""

from os import PathLike
from typing import Dict, List, Tuple
import json
import re

from polyconst.exceptions import InputError
from polyconst.names import *


def load_document(source) -> Dict:
    """Load a share document

    A share document is a JSON object of the form

        {
            "keys": {"n": 4, "k": 3},
            "1": {"base": "10", "value": "4"},
            "2": {"base": "2", "value": "111"},
            ...
        }

    Args:
        source (str, PathLike, file object or dict):
            Path to a JSON file, an open text stream or an already parsed
            document. Dicts are returned unchanged.

    Returns:
        (dict): The parsed document.
    """
    if isinstance(source, dict):
        return source
    try:
        if isinstance(source, (str, PathLike)):
            with open(source, 'r', encoding='utf-8') as fs:
                document = json.load(fs, object_pairs_hook=_reject_duplicate_keys)
        else:
            document = json.load(source, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise InputError(f"Share document is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise InputError(f"Share document is not valid UTF-8: {e}") from e
    if not isinstance(document, dict):
        raise InputError("Share document must be a JSON object.")
    return document


def _reject_duplicate_keys(pairs) -> Dict:
    document = {}
    for key, value in pairs:
        if key in document:
            raise InputError(f"Share document contains key {key!r} more than once.")
        document[key] = value
    return document


def _parse_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise InputError(f"{what} must be an integer, got {value!r}.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if re.fullmatch(r"[+-]?[0-9]+", value):
            return int(value, 10)
    raise InputError(f"{what} must be an integer, got {value!r}.")


def parse_keys(document: Dict) -> Tuple[int, int]:
    """Read n (number of shares) and k (threshold) from the "keys" entry

    Returns:
        (tuple): (n, k)
    """
    if KEYS not in document:
        raise InputError(f"Share document has no '{KEYS}' entry.")
    keys = document[KEYS]
    if not isinstance(keys, dict):
        raise InputError(f"'{KEYS}' must be an object with entries '{N}' and '{K}'.")
    for key in (N, K):
        if key not in keys:
            raise InputError(f"'{KEYS}' has no '{key}' entry.")
    n = _parse_int(keys[N], f"'{KEYS}.{N}'")
    k = _parse_int(keys[K], f"'{KEYS}.{K}'")
    return n, k


def parse_shares(document: Dict) -> List[Tuple[int, int, str]]:
    """Read all shares from a share document

    Every top-level key other than "keys" is the x-coordinate of one share.

    Returns:
        (list of tuples):
        (x, base, value) triples in document order. The values are not decoded.
    """
    shares = []
    for key, entry in document.items():
        if key == KEYS:
            continue
        x = _parse_int(key, f"Share key {key!r}")
        if not isinstance(entry, dict):
            raise InputError(f"Share {key!r} must be an object with entries '{BASE}' and '{VALUE}'.")
        for field in (BASE, VALUE):
            if field not in entry:
                raise InputError(f"Share {key!r} has no '{field}' entry.")
        base = _parse_int(entry[BASE], f"Base of share {key!r}")
        value = entry[VALUE]
        if not isinstance(value, str):
            raise InputError(f"Value of share {key!r} must be a string, got {value!r}.")
        shares.append((x, base, value))
    return shares
