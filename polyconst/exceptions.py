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
"""Exceptions raised by the polyconst package

All errors derive from PolyConstError. The concrete classes additionally derive
from the closest built-in exception, so callers catching ValueError or
ArithmeticError keep working.
"""


class PolyConstError(Exception):
    """Base class of all polyconst errors"""


class InvalidDigit(PolyConstError, ValueError):
    """A character is not a valid digit in the stated base

    Args:
        char (str):
            The offending character.

        base (int):
            The base the value was decoded in.

        value (str):
            The complete digit string (optional).
    """

    def __init__(self, char: str, base: int, value: str = None):
        self.char = char
        self.base = base
        self.value = value
        msg = f"Invalid digit {char!r} for base {base}"
        if value is not None:
            msg += f" in value {value!r}"
        super().__init__(msg)


class InvalidBase(PolyConstError, ValueError):
    """The stated base is outside of [2, 36]"""

    def __init__(self, base):
        self.base = base
        super().__init__(f"Base must be an integer in [2, 36], got {base!r}")


class DivisionByZero(PolyConstError, ZeroDivisionError):
    """A fraction with zero denominator was requested"""


class SingularSystem(PolyConstError, ArithmeticError):
    """Gaussian elimination found no pivot in a column

    For a Vandermonde system this means that two x-coordinates coincide.
    """

    def __init__(self, column: int, size: int):
        self.column = column
        self.size = size
        super().__init__(f"Matrix is singular: no pivot in column {column} of {size}x{size} system "
                         "(duplicate x-coordinates?)")


class InputError(PolyConstError, ValueError):
    """The share document or the requested number of points is invalid"""
