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
Gaussian elimination for square systems with exact rational entries.

Since all arithmetic is exact, the first nonzero entry of a column is as good
a pivot as any other; no magnitude based pivoting is done.
"""

from typing import List, Sequence
import logging

from .big_fraction import BigFraction
from .rational_matrix import RationalMatrix
from ..exceptions import SingularSystem

LOG = logging.getLogger(__name__)


class Gauss:
    """
    Solver for A * x = y with a square RationalMatrix A.

    The three steps are exposed separately. forward_eliminate and
    back_substitute work in place on the matrix and right-hand side they are
    given; solve works on copies and leaves its arguments untouched.
    """

    @staticmethod
    def find_pivot(matrix: RationalMatrix, col: int) -> int:
        """
        First row at or below col with a nonzero entry in column col.

        Returns:
            Row index, or -1 if all candidates are zero
        """
        for row in range(col, matrix.get_row_count()):
            if not matrix.get_value_at(row, col).is_zero():
                return row
        return -1

    @staticmethod
    def forward_eliminate(matrix: RationalMatrix, rhs: List[BigFraction]):
        """
        Reduce matrix to upper triangular form with unit diagonal, in place.

        For every column: pick the pivot, swap it into place together with its
        right-hand side entry, scale the pivot row so that the pivot becomes 1,
        then clear the column below it.

        Args:
            matrix: Square matrix (modified in place)
            rhs: Right-hand side vector (modified in place)

        Raises:
            SingularSystem: if some column has no nonzero pivot candidate
        """
        n = matrix.get_row_count()
        if not matrix.is_square():
            raise ValueError(f"Matrix must be square: {matrix.get_row_count()}x{matrix.get_column_count()}")
        if len(rhs) != n:
            raise ValueError(f"Right-hand side has {len(rhs)} entries, expected {n}")

        for col in range(n):
            pivot = Gauss.find_pivot(matrix, col)
            if pivot < 0:
                raise SingularSystem(col, n)
            if pivot != col:
                LOG.debug(f"Swapping rows {col} and {pivot}")
                matrix.swap_rows(col, pivot)
                rhs[col], rhs[pivot] = rhs[pivot], rhs[col]

            inv = matrix.get_value_at(col, col).reciprocal()
            for j in range(col, n):
                matrix.set_value_at(col, j, matrix.get_value_at(col, j).multiply(inv))
            rhs[col] = rhs[col].multiply(inv)

            for i in range(col + 1, n):
                factor = matrix.get_value_at(i, col)
                if factor.is_zero():
                    continue
                for j in range(col, n):
                    matrix.set_value_at(i, j, matrix.get_value_at(i, j).subtract(factor.multiply(matrix.get_value_at(col, j))))
                rhs[i] = rhs[i].subtract(factor.multiply(rhs[col]))

    @staticmethod
    def back_substitute(matrix: RationalMatrix, rhs: Sequence[BigFraction]) -> List[BigFraction]:
        """
        Solve an upper triangular system with unit diagonal.

        Args:
            matrix: Output of forward_eliminate
            rhs: Right-hand side after forward_eliminate

        Returns:
            Solution vector
        """
        n = matrix.get_row_count()
        solution = [BigFraction.ZERO] * n
        for i in range(n - 1, -1, -1):
            sum_val = BigFraction.ZERO
            for j in range(i + 1, n):
                sum_val = sum_val.add(matrix.get_value_at(i, j).multiply(solution[j]))
            solution[i] = rhs[i].subtract(sum_val)
        return solution

    @staticmethod
    def solve(matrix: RationalMatrix, rhs: Sequence[BigFraction]) -> List[BigFraction]:
        """
        Solve matrix * x = rhs exactly.

        Args:
            matrix: Square, nonsingular matrix (not modified)
            rhs: Right-hand side (not modified)

        Returns:
            The unique solution x

        Raises:
            SingularSystem: if the matrix is singular
        """
        work_matrix = matrix.copy()
        work_rhs = [v if isinstance(v, BigFraction) else BigFraction(v) for v in rhs]
        Gauss.forward_eliminate(work_matrix, work_rhs)
        return Gauss.back_substitute(work_matrix, work_rhs)
