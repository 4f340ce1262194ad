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
Dense matrices with exact rational entries.

Entries are BigFraction objects held in a numpy object array, so numpy only
provides storage and indexing; all arithmetic stays exact.
"""

from typing import List, Sequence, Union
import numpy as np

from .big_fraction import BigFraction


class RationalMatrix:
    """
    Dense rows x cols matrix of BigFraction entries, initialized to zero.

    Args:
        rows: Number of rows
        cols: Number of columns
    """

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.data = np.full((rows, cols), BigFraction.ZERO, dtype=object)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[int, BigFraction]]]) -> 'RationalMatrix':
        """
        Create a matrix from a list of rows of integers or BigFractions.

        Args:
            rows: Equally long rows

        Returns:
            RationalMatrix with the same values
        """
        num_rows = len(rows)
        num_cols = len(rows[0]) if num_rows else 0
        matrix = cls(num_rows, num_cols)
        for i, row in enumerate(rows):
            if len(row) != num_cols:
                raise ValueError(f"Row {i} has {len(row)} entries, expected {num_cols}")
            for j, val in enumerate(row):
                matrix.set_value_at(i, j, val)
        return matrix

    def get_row_count(self) -> int:
        return self.rows

    def get_column_count(self) -> int:
        return self.cols

    def is_square(self) -> bool:
        return self.rows == self.cols

    def get_value_at(self, row: int, col: int) -> BigFraction:
        return self.data[row, col]

    def set_value_at(self, row: int, col: int, value: Union[int, BigFraction]):
        """Set value at position (row, col), integers are converted to BigFraction"""
        if not isinstance(value, BigFraction):
            value = BigFraction.from_integer(value)
        self.data[row, col] = value

    def swap_rows(self, row1: int, row2: int):
        """Swap two rows."""
        if row1 == row2:
            return
        self.data[[row1, row2], :] = self.data[[row2, row1], :]

    def get_row(self, row: int) -> List[BigFraction]:
        return list(self.data[row, :])

    def get_column(self, col: int) -> List[BigFraction]:
        return list(self.data[:, col])

    def multiply_vector(self, vector: Sequence[BigFraction]) -> List[BigFraction]:
        """
        Exact matrix-vector product self * vector.

        Args:
            vector: Sequence of length cols

        Returns:
            List of length rows
        """
        if len(vector) != self.cols:
            raise ValueError(f"Vector length {len(vector)} does not match {self.rows}x{self.cols} matrix")
        result = []
        for i in range(self.rows):
            sum_val = BigFraction.ZERO
            for j in range(self.cols):
                a_ij = self.data[i, j]
                if not a_ij.is_zero():
                    sum_val = sum_val + a_ij * vector[j]
            result.append(sum_val)
        return result

    def copy(self) -> 'RationalMatrix':
        # entries are immutable, a shallow copy of the array is enough
        result = RationalMatrix(self.rows, self.cols)
        result.data = self.data.copy()
        return result

    def to_numpy(self, as_float: bool = False) -> np.ndarray:
        """
        Convert to numpy array.

        Args:
            as_float: If True, convert to float array; if False, return object array with BigFractions
        """
        if as_float:
            return np.array([[float(v) for v in row] for row in self.data], dtype=float).reshape(self.rows, self.cols)
        return self.data.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and \
            all(a == b for a, b in zip(self.data.flat, other.data.flat))

    def __str__(self) -> str:
        return "\n".join("[" + ", ".join(str(v) for v in row) + "]" for row in self.data)

    def __repr__(self) -> str:
        return f"RationalMatrix({self.rows}x{self.cols})"
