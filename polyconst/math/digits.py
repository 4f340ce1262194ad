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
"""Decoding of digit strings written in bases 2 to 36"""

from numbers import Integral

from ..exceptions import InvalidBase, InvalidDigit
from ..names import MIN_BASE, MAX_BASE


def digit_value(char: str) -> int:
    """Value of a single ASCII digit character

    '0'-'9' map to 0-9, 'a'-'z' and 'A'-'Z' both map to 10-35.

    Returns:
        (int): The digit value, or -1 if char is not a digit in any base.
    """
    if '0' <= char <= '9':
        return ord(char) - ord('0')
    if 'a' <= char <= 'z':
        return 10 + ord(char) - ord('a')
    if 'A' <= char <= 'Z':
        return 10 + ord(char) - ord('A')
    return -1


def check_base(base) -> int:
    """Return base as int, raise InvalidBase if it is not in [2, 36]"""
    if isinstance(base, bool) or not isinstance(base, Integral) or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)
    return int(base)


def decode(value: str, base: int) -> int:
    """Decode a digit string in the given base into an exact integer

    The digits are evaluated left to right with Horner's rule, so the result
    is exact for values of any length. Upper and lower case letters denote
    the same digit. An empty string decodes to 0.

    Example:
        decode('ff', 16) == decode('FF', 16) == 255

    Args:
        value (str):
            Digit string, e.g. '1a3f'.

        base (int):
            Base of the digit string, between 2 and 36.

    Returns:
        (int): The decoded value.

    Raises:
        InvalidBase: if base is outside [2, 36].
        InvalidDigit: for the first character that is not a digit below base.
    """
    base = check_base(base)
    result = 0
    for char in value:
        digit = digit_value(char)
        if digit < 0 or digit >= base:
            raise InvalidDigit(char, base, value)
        result = result * base + digit
    return result
