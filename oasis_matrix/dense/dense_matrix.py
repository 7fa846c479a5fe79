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
Shared dense matrix behavior

``DenseMatrix`` owns a row-major buffer and implements the element-wise and
algebraic operations common to fixed-shape and dynamic-shape matrices.
Subclasses decide how shapes are carried and how operand compatibility is
enforced through three hooks:

- ``_same_kind``: whether another matrix may be combined with this one
- ``_check_same_shape``: precondition for element-wise operations
- ``_check_inner_dimension``: precondition for matrix multiplication

Operations that produce a matrix always return a new instance. Only
``__setitem__``, ``mutate`` and the compound assignment operators modify a
matrix in place.
"""

from __future__ import annotations

import numbers
from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from collections.abc import Iterator
from typing import Any
from typing import Union

from oasis_matrix.config.format_params import FormatParams
from oasis_matrix.dense import row_major
from oasis_matrix.dense.formatting import format_matrix
from oasis_matrix.dense.row_major import Buffer


RowKey = Union[int, tuple[int, int]]


def is_scalar(value: object) -> bool:
    """Return True for real scalars usable in matrix arithmetic."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_index(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _element_key(key: object) -> tuple[int, int]:
    """Validate a ``(row, col)`` key and return it as plain ints."""
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError("matrix elements are addressed by a (row, col) pair")
    r, c = key
    if not _is_index(r) or not _is_index(c):
        raise TypeError("matrix row and column indices must be integers")
    return int(r), int(c)


class DenseMatrix(ABC):
    """Dense row-major matrix of double-precision values."""

    __slots__ = ("_values",)

    # Make numpy scalars defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    _values: Buffer

    @property
    @abstractmethod
    def rows(self) -> int:
        """Return the number of rows."""

    @property
    @abstractmethod
    def cols(self) -> int:
        """Return the number of columns."""

    @abstractmethod
    def _wrap(self, rows: int, cols: int, values: Buffer) -> Any:
        """Return a matrix of this kind that takes ownership of ``values``."""

    @abstractmethod
    def _same_kind(self, other: DenseMatrix) -> bool:
        """Return True if ``other`` may be combined with this matrix."""

    @abstractmethod
    def _check_same_shape(self, other: DenseMatrix, operation: str) -> None:
        """Raise ShapeMismatchError if shapes differ."""

    @abstractmethod
    def _check_inner_dimension(self, other: DenseMatrix) -> None:
        """Raise ShapeMismatchError if ``self @ other`` is undefined."""

    def _require_same_kind(self, other: object, operation: str) -> DenseMatrix:
        if not isinstance(other, DenseMatrix) or not self._same_kind(other):
            raise TypeError(
                f"cannot {operation} {type(self).__name__} "
                f"and {type(other).__name__}"
            )
        return other

    #
    # Shape and element access
    #

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, cols)."""
        return self.rows, self.cols

    def is_square(self) -> bool:
        """Return True when rows equal cols."""
        return self.rows == self.cols

    def values(self) -> Buffer:
        """Return a row-major copy of the entries."""
        return list(self._values)

    def rows_as_lists(self) -> list[list[float]]:
        """Return the entries as a nested list, one list per row."""
        return [self.row(r) for r in range(self.rows)]

    def row(self, r: int) -> Buffer:
        """Return a copy of row ``r``."""
        return row_major.row_of(self._values, self.rows, self.cols, r)

    def col(self, c: int) -> Buffer:
        """Return a copy of column ``c``."""
        return row_major.col_of(self._values, self.rows, self.cols, c)

    def row_iter(self) -> Iterator[tuple[float, ...]]:
        """Iterate over rows as tuples."""
        for r in range(self.rows):
            yield tuple(self.row(r))

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return self.row_iter()

    def __len__(self) -> int:
        return self.rows

    def __getitem__(self, key: RowKey) -> Any:
        """Return row ``key`` as a tuple, or the entry at ``(row, col)``."""
        if isinstance(key, tuple):
            r, c = _element_key(key)
            return row_major.mat_get(self._values, self.rows, self.cols, r, c)
        if not _is_index(key):
            raise TypeError("matrix indices must be a row or a (row, col) pair")
        return tuple(row_major.row_of(self._values, self.rows, self.cols, int(key)))

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        """Set the entry at ``(row, col)``."""
        r, c = _element_key(key)
        row_major.mat_set(
            self._values,
            self.rows,
            self.cols,
            r,
            c,
            row_major.to_float(value, "value"),
        )

    #
    # Comparison and representation
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix) or not self._same_kind(other):
            return NotImplemented
        return self.shape == other.shape and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows_as_lists()!r})"

    def __str__(self) -> str:
        return self.format()

    def format(self, params: FormatParams | None = None) -> str:
        """Return a multi-line, column-aligned rendering of the matrix."""
        return format_matrix(self._values, self.rows, self.cols, params)

    #
    # Element-wise construction
    #

    def copy(self) -> Any:
        """Return a deep copy."""
        return self._wrap(self.rows, self.cols, list(self._values))

    def map(self, f: Callable[[float], float]) -> Any:
        """Return a new matrix with ``f`` applied to every entry."""
        return self._wrap(
            self.rows,
            self.cols,
            [row_major.to_float(f(value), "mapped value") for value in self._values],
        )

    def mutate(self, f: Callable[[float, int, int], float]) -> None:
        """Replace every entry in place with ``f(value, row, col)``."""
        cols: int = self.cols
        # Commit only after every entry converts
        updated: Buffer = [
            row_major.to_float(f(value, index // cols, index % cols), "mutated value")
            for index, value in enumerate(self._values)
        ]
        self._values[:] = updated

    def transpose(self) -> Any:
        """Return the transpose, with rows and columns swapped."""
        return self._wrap(
            self.cols,
            self.rows,
            row_major.mat_transpose(self._values, self.rows, self.cols),
        )

    #
    # Arithmetic
    #

    def add(self, other: DenseMatrix) -> Any:
        """Return the element-wise sum."""
        rhs: DenseMatrix = self._require_same_kind(other, "add")
        self._check_same_shape(rhs, "add")
        return self._wrap(
            self.rows, self.cols, row_major.mat_add(self._values, rhs._values)
        )

    def subtract(self, other: DenseMatrix) -> Any:
        """Return the element-wise difference."""
        rhs: DenseMatrix = self._require_same_kind(other, "subtract")
        self._check_same_shape(rhs, "subtract")
        return self._wrap(
            self.rows, self.cols, row_major.mat_sub(self._values, rhs._values)
        )

    def scale(self, scalar: float) -> Any:
        """Return the matrix multiplied by a scalar."""
        s: float = row_major.to_float(scalar, "scalar")
        return self._wrap(self.rows, self.cols, row_major.mat_scale(self._values, s))

    def divide(self, scalar: float) -> Any:
        """Return the matrix divided by a scalar, with IEEE-754 zero division."""
        s: float = row_major.to_float(scalar, "scalar")
        return self._wrap(self.rows, self.cols, row_major.mat_div(self._values, s))

    def negate(self) -> Any:
        """Return the matrix scaled by -1."""
        return self.scale(-1.0)

    def matmul(self, other: DenseMatrix) -> Any:
        """Return the matrix product ``self * other``."""
        rhs: DenseMatrix = self._require_same_kind(other, "multiply")
        self._check_inner_dimension(rhs)
        return self._wrap(
            self.rows,
            rhs.cols,
            row_major.mat_mul(
                self._values, self.rows, self.cols, rhs._values, rhs.rows, rhs.cols
            ),
        )

    def __add__(self, other: object) -> Any:
        if not isinstance(other, DenseMatrix) or not self._same_kind(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Any:
        if not isinstance(other, DenseMatrix) or not self._same_kind(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Any:
        if isinstance(other, DenseMatrix):
            if not self._same_kind(other):
                return NotImplemented
            return self.matmul(other)
        if is_scalar(other):
            return self.scale(other)  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, other: object) -> Any:
        if is_scalar(other):
            return self.scale(other)  # type: ignore[arg-type]
        return NotImplemented

    def __matmul__(self, other: object) -> Any:
        if not isinstance(other, DenseMatrix) or not self._same_kind(other):
            return NotImplemented
        return self.matmul(other)

    def __truediv__(self, other: object) -> Any:
        if not is_scalar(other):
            return NotImplemented
        return self.divide(other)  # type: ignore[arg-type]

    def __neg__(self) -> Any:
        return self.negate()

    def __pos__(self) -> Any:
        return self.copy()

    def __iadd__(self, other: object) -> Any:
        if not isinstance(other, DenseMatrix) or not self._same_kind(other):
            return NotImplemented
        self._check_same_shape(other, "add")
        self._values[:] = row_major.mat_add(self._values, other._values)
        return self

    def __isub__(self, other: object) -> Any:
        if not isinstance(other, DenseMatrix) or not self._same_kind(other):
            return NotImplemented
        self._check_same_shape(other, "subtract")
        self._values[:] = row_major.mat_sub(self._values, other._values)
        return self

    def __imul__(self, other: object) -> Any:
        if not is_scalar(other):
            return NotImplemented
        s: float = row_major.to_float(other, "scalar")
        self._values[:] = row_major.mat_scale(self._values, s)
        return self

    def __itruediv__(self, other: object) -> Any:
        if not is_scalar(other):
            return NotImplemented
        s: float = row_major.to_float(other, "scalar")
        self._values[:] = row_major.mat_div(self._values, s)
        return self

    #
    # Structural predicates, False for non-square matrices
    #

    def is_diagonal(self) -> bool:
        """Return True when every off-diagonal entry is exactly zero."""
        if not self.is_square():
            return False
        return row_major.is_diagonal(self._values, self.rows)

    def is_symmetric(self) -> bool:
        """Return True when the matrix equals its transpose."""
        if not self.is_square():
            return False
        return self._values == row_major.mat_transpose(
            self._values, self.rows, self.cols
        )

    def is_orthogonal(self) -> bool:
        """Return True when ``A * A^T`` is exactly the identity."""
        if not self.is_square():
            return False
        n: int = self.rows
        product: Buffer = row_major.mat_mul(
            self._values,
            n,
            n,
            row_major.mat_transpose(self._values, n, n),
            n,
            n,
        )
        return row_major.is_identity(product, n)

    def is_scalar_identity_multiple(self) -> bool:
        """Return True when the matrix equals ``I * A[0][0]``."""
        if not self.is_square():
            return False
        n: int = self.rows
        if n == 0:
            return True
        scaled: Buffer = row_major.mat_scale(row_major.identity(n), self._values[0])
        return self._values == scaled
