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
"""
Exact rational numbers over arbitrary-precision integers.

BigFraction is a thin immutable wrapper around Python's fractions.Fraction.
Fraction already keeps its value fully reduced with a positive denominator,
so every BigFraction observable to callers is normalized. The wrapper adds
the error semantics used throughout the package (DivisionByZero instead of a
bare ZeroDivisionError) and a small, explicit method API for the solver.
"""

from fractions import Fraction
from numbers import Integral
from typing import Union

from sympy import Rational

from ..exceptions import DivisionByZero


class BigFraction:
    """
    Normalized rational number numerator/denominator.

    Invariants: denominator > 0 and gcd(|numerator|, denominator) == 1.
    Instances are never mutated; all arithmetic returns new instances.

    Args:
        numerator: An integer numerator, or a BigFraction/Fraction to copy
        denominator: Optional integer denominator (default 1)
    """

    __slots__ = ('_fraction',)

    def __init__(self, numerator: Union[int, 'BigFraction', Fraction], denominator: int = None):
        if denominator is None:
            if isinstance(numerator, BigFraction):
                fraction = numerator._fraction
            elif isinstance(numerator, Fraction):
                fraction = numerator
            elif isinstance(numerator, Integral):
                fraction = Fraction(int(numerator))
            else:
                raise TypeError(f"Cannot create BigFraction from {type(numerator).__name__}")
        else:
            if not isinstance(numerator, Integral) or not isinstance(denominator, Integral):
                raise TypeError("Numerator and denominator must be integers")
            if denominator == 0:
                raise DivisionByZero(f"Division by zero: {numerator}/0")
            fraction = Fraction(int(numerator), int(denominator))
        object.__setattr__(self, '_fraction', fraction)

    def __setattr__(self, name, value):
        raise AttributeError("BigFraction is immutable")

    @staticmethod
    def from_integer(value: int) -> 'BigFraction':
        """Whole number value/1"""
        return BigFraction(value, 1)

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    def add(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._fraction + _coerce(other)._fraction)

    def subtract(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._fraction - _coerce(other)._fraction)

    def multiply(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._fraction * _coerce(other)._fraction)

    def divide(self, other: 'BigFraction') -> 'BigFraction':
        """Divide by other, raises DivisionByZero if other is zero"""
        other = _coerce(other)
        if other.is_zero():
            raise DivisionByZero(f"Division by zero: {self} / 0")
        return BigFraction(self._fraction / other._fraction)

    def reciprocal(self) -> 'BigFraction':
        """Return 1/this, raises DivisionByZero if this is zero"""
        return BigFraction(self.denominator, self.numerator)

    def negate(self) -> 'BigFraction':
        return BigFraction(-self._fraction)

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self.numerator < 0:
            return -1
        elif self.numerator > 0:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_one(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_fraction(self) -> Fraction:
        return self._fraction

    def to_sympy(self) -> Rational:
        """Convert to a sympy Rational"""
        return Rational(self.numerator, self.denominator)

    def __eq__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction == other._fraction
        if isinstance(other, (Integral, Fraction)):
            return self._fraction == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction < other._fraction
        return NotImplemented

    def __le__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction <= other._fraction
        return NotImplemented

    def __gt__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction > other._fraction
        return NotImplemented

    def __ge__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction >= other._fraction
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __float__(self) -> float:
        return float(self._fraction)

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"BigFraction({self.numerator}, {self.denominator})"

    # Python operator overloading for convenience
    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return _coerce(other).add(self)

    def __sub__(self, other):
        return self.subtract(other)

    def __rsub__(self, other):
        return _coerce(other).subtract(self)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return _coerce(other).multiply(self)

    def __truediv__(self, other):
        return self.divide(other)

    def __rtruediv__(self, other):
        return _coerce(other).divide(self)

    def __neg__(self):
        return self.negate()


def _coerce(value) -> BigFraction:
    if isinstance(value, BigFraction):
        return value
    return BigFraction(value)


# Constants
BigFraction.ZERO = BigFraction(0, 1)
BigFraction.ONE = BigFraction(1, 1)
