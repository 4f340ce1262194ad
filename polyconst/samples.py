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
"""Decoded sample points and their selection"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import logging

from polyconst.exceptions import InputError
from polyconst.math import decode
from polyconst.polynomial import Polynomial


@dataclass(frozen=True)
class Sample:
    """
    One decoded point (x, y) of the unknown polynomial.

    base and value record the digit string y was decoded from.
    """
    x: int
    y: int
    base: int = 10
    value: Optional[str] = None


def decode_samples(shares: Iterable[Tuple[int, int, str]]) -> List[Sample]:
    """Decode (x, base, value) triples into samples

    Raises:
        InvalidDigit, InvalidBase: for the first share that cannot be decoded.
    """
    samples = []
    for x, base, value in shares:
        samples.append(Sample(x, decode(value, base), base, value))
    return samples


def select_samples(samples: List[Sample], k: int) -> Tuple[List[Sample], List[Sample]]:
    """Pick the k samples with the lowest x-coordinates

    Args:
        samples (list of Sample):
            All available samples.

        k (int):
            Number of samples to use, 1 <= k <= len(samples).

    Returns:
        (tuple): (selected, remaining), both sorted ascending by x.
    """
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise InputError(f"k must be a positive integer, got {k!r}.")
    if k > len(samples):
        raise InputError(f"k={k} points requested but only {len(samples)} samples available.")
    ordered = sorted(samples, key=lambda s: s.x)
    return ordered[:k], ordered[k:]


def inconsistent_samples(polynomial: Polynomial, samples: Iterable[Sample]) -> List[Sample]:
    """Samples that do not lie on the polynomial"""
    corrupt = []
    for s in samples:
        expected = polynomial.evaluate(s.x)
        if expected != s.y:
            logging.warning(f"Sample x={s.x} (value '{s.value}', base {s.base}) does not lie on the "
                            f"reconstructed polynomial: expected {expected}, got {s.y}.")
            corrupt.append(s)
    return corrupt
