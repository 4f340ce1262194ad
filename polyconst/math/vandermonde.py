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
"""Polynomial interpolation through a Vandermonde system"""

from numbers import Integral
from typing import List, Sequence
import logging

from .big_fraction import BigFraction
from .gauss import Gauss
from .rational_matrix import RationalMatrix

LOG = logging.getLogger(__name__)


def vandermonde_matrix(xs: Sequence[int]) -> RationalMatrix:
    """Build the k x k Vandermonde matrix of xs

    Row i holds xs[i]^(k-1), xs[i]^(k-2), ..., xs[i]^0, i.e. column 0 belongs
    to the highest power.
    """
    k = len(xs)
    matrix = RationalMatrix(k, k)
    for i, x in enumerate(xs):
        for j in range(k):
            matrix.set_value_at(i, j, BigFraction.from_integer(x**(k - 1 - j)))
    return matrix


def solve_vandermonde(xs: Sequence[int], ys: Sequence[int]) -> List[BigFraction]:
    """Coefficients of the polynomial of degree <= k-1 through k points

    Example:
        solve_vandermonde([1, 2, 3], [3, 7, 13]) == [1, 1, 1]  # x^2 + x + 1

    Args:
        xs (list of int):
            k pairwise distinct integer x-coordinates.

        ys (list of int):
            The k corresponding y-values.

    Returns:
        (list of BigFraction):
        k coefficients ordered from the x^(k-1) coefficient down to the
        constant term.

    Raises:
        SingularSystem: if two x-coordinates coincide.
    """
    if len(xs) != len(ys):
        raise ValueError(f"Got {len(xs)} x-values but {len(ys)} y-values")
    if not xs:
        raise ValueError("Need at least one point")
    for x in list(xs) + list(ys):
        if isinstance(x, bool) or not isinstance(x, Integral):
            raise TypeError(f"Sample coordinates must be integers, got {x!r}")
    xs = [int(x) for x in xs]

    LOG.debug(f"Solving {len(xs)}x{len(xs)} Vandermonde system for x = {xs}")
    matrix = vandermonde_matrix(xs)
    rhs = [BigFraction.from_integer(y) for y in ys]
    Gauss.forward_eliminate(matrix, rhs)
    return Gauss.back_substitute(matrix, rhs)
