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
"""Class: Polynomial with exact rational coefficients"""

from typing import Sequence, Union
from sympy import Symbol, Expr, Add

from polyconst.math import BigFraction


class Polynomial(object):
    """Immutable polynomial with BigFraction coefficients

    The coefficients are stored highest degree first, in the same order the
    Vandermonde solver produces them. Leading zero coefficients are kept, so
    degree is the nominal degree k-1 of an interpolation through k points.

    Example:
        p = Polynomial([1, 1, 1])   # x^2 + x + 1
        p.evaluate(2)               # BigFraction(7, 1)

    Args:
        coefficients (list of BigFraction or int):
            Coefficients from x^(k-1) down to x^0. At least one is required.
    """

    def __init__(self, coefficients: Sequence[Union[BigFraction, int]]):
        if len(coefficients) == 0:
            raise ValueError("A polynomial needs at least one coefficient")
        self._coefficients = tuple(c if isinstance(c, BigFraction) else BigFraction(c) for c in coefficients)

    @property
    def coefficients(self) -> tuple:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    @property
    def constant_term(self) -> BigFraction:
        return self._coefficients[-1]

    def evaluate(self, x: Union[int, BigFraction]) -> BigFraction:
        """Exact value at x via Horner's rule"""
        x = x if isinstance(x, BigFraction) else BigFraction(x)
        result = BigFraction.ZERO
        for c in self._coefficients:
            result = result.multiply(x).add(c)
        return result

    def is_integral(self) -> bool:
        """True if all coefficients are integers"""
        return all(c.is_integer() for c in self._coefficients)

    def to_sympy(self, symbol: Union[str, Symbol] = 'x') -> Expr:
        """Return the polynomial as a sympy expression in symbol"""
        if isinstance(symbol, str):
            symbol = Symbol(symbol)
        return Add(*[c.to_sympy() * symbol**(self.degree - i) for i, c in enumerate(self._coefficients)])

    def __call__(self, x):
        return self.evaluate(x)

    def __len__(self) -> int:
        return len(self._coefficients)

    def __eq__(self, other) -> bool:
        if isinstance(other, Polynomial):
            return self._coefficients == other._coefficients
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __str__(self) -> str:
        terms = []
        for i, c in enumerate(self._coefficients):
            if c.is_zero():
                continue
            power = self.degree - i
            sign = '-' if c.signum() < 0 else '+'
            mag = c.negate() if c.signum() < 0 else c
            if power == 0:
                body = str(mag)
            else:
                var = 'x' if power == 1 else f'x^{power}'
                if mag.is_one():
                    body = var
                elif mag.is_integer():
                    body = f'{mag}*{var}'
                else:
                    body = f'({mag})*{var}'
            terms.append((sign, body))
        if not terms:
            return '0'
        first_sign, first_body = terms[0]
        text = ('-' if first_sign == '-' else '') + first_body
        for sign, body in terms[1:]:
            text += f' {sign} {body}'
        return text

    def __repr__(self) -> str:
        return f"Polynomial([{', '.join(str(c) for c in self._coefficients)}])"
