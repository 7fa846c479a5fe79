################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Matrices whose shape is chosen at runtime

Every binary operation starts by comparing operand shapes and raises
``ShapeMismatchError`` when they are incompatible. Square-only operations
raise the same error for non-square matrices, while the structural
predicates answer False.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from oasis_matrix.dense import elimination
from oasis_matrix.dense import row_major
from oasis_matrix.dense.dense_matrix import DenseMatrix
from oasis_matrix.dense.matrix_errors import ShapeMismatchError
from oasis_matrix.dense.row_major import Buffer
from oasis_matrix.dense.row_major import ElementFunction


class DynamicMatrix(DenseMatrix):
    """Dense matrix with runtime row and column counts."""

    __slots__ = ("_rows", "_cols")

    def __init__(self, rows: Sequence[Sequence[float]]) -> None:
        """Initialize from a nested literal of equal-length rows."""
        values: Buffer
        n_rows: int
        n_cols: int
        values, n_rows, n_cols = row_major.flatten_rows(rows)
        self._values = values
        self._rows: int = n_rows
        self._cols: int = n_cols

    @classmethod
    def _from_buffer(cls, rows: int, cols: int, values: Buffer) -> DynamicMatrix:
        row_major.validate_buffer(values, rows, cols, "values")
        matrix: DynamicMatrix = object.__new__(cls)
        matrix._values = values
        matrix._rows = rows
        matrix._cols = cols
        return matrix

    #
    # Construction
    #

    @classmethod
    def zero(cls, rows: int, cols: int) -> DynamicMatrix:
        """Return a zero-filled ``rows x cols`` matrix."""
        return cls._from_buffer(rows, cols, row_major.zeros(rows, cols))

    @classmethod
    def generate(cls, rows: int, cols: int, f: ElementFunction) -> DynamicMatrix:
        """Return the ``rows x cols`` matrix whose entry (r, c) is ``f(r, c)``."""
        return cls._from_buffer(rows, cols, row_major.generate(rows, cols, f))

    @classmethod
    def identity(cls, n: int) -> DynamicMatrix:
        """Return the ``n x n`` identity matrix."""
        return cls._from_buffer(n, n, row_major.identity(n))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> DynamicMatrix:
        """Build a matrix from a nested literal."""
        return cls(rows)

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Sequence[float]) -> DynamicMatrix:
        """Build a matrix from a flat row-major sequence."""
        buffer: Buffer = [
            row_major.to_float(value, f"values[{index}]")
            for index, value in enumerate(values)
        ]
        return cls._from_buffer(rows, cols, buffer)

    #
    # DenseMatrix hooks
    #

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _wrap(self, rows: int, cols: int, values: Buffer) -> DynamicMatrix:
        return type(self)._from_buffer(rows, cols, values)

    def _same_kind(self, other: DenseMatrix) -> bool:
        return isinstance(other, DynamicMatrix)

    def _check_same_shape(self, other: DenseMatrix, operation: str) -> None:
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"cannot {operation} matrices of different sizes: "
                f"{self.rows}x{self.cols} and {other.rows}x{other.cols}"
            )

    def _check_inner_dimension(self, other: DenseMatrix) -> None:
        if self.cols != other.rows:
            raise ShapeMismatchError(
                f"cannot multiply {self.rows}x{self.cols} by "
                f"{other.rows}x{other.cols}: inner dimensions differ"
            )

    def _require_square(self, operation: str) -> int:
        if not self.is_square():
            raise ShapeMismatchError(
                f"{operation} requires a square matrix, got {self.rows}x{self.cols}"
            )
        return self._rows

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self).from_values, (self._rows, self._cols, list(self._values))

    #
    # Square-matrix kernel
    #

    def determinant(self) -> float:
        """Return the determinant, 0.0 for singular matrices.

        Raises:
            ShapeMismatchError: If the matrix is not square
        """
        n: int = self._require_square("determinant")
        return elimination.determinant(self._values, n)

    def reduced_row_echelon_form(self) -> DynamicMatrix | None:
        """Return the upper triangular reduction, or None if singular.

        Raises:
            ShapeMismatchError: If the matrix is not square
        """
        n: int = self._require_square("reduced_row_echelon_form")
        reduced: Buffer | None = elimination.reduced_row_echelon_form(self._values, n)
        if reduced is None:
            return None
        return self._wrap(n, n, reduced)

    def inverse(self) -> DynamicMatrix | None:
        """Return the inverse, or None if the matrix is singular.

        Raises:
            ShapeMismatchError: If the matrix is not square
        """
        n: int = self._require_square("inverse")
        inverted: Buffer | None = elimination.inverse(self._values, n)
        if inverted is None:
            return None
        return self._wrap(n, n, inverted)
