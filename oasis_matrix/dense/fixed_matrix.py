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
Matrices whose shape is part of their type

``FixedMatrix[R, C]`` returns a class specialized for ``R x C`` matrices.
Specializations are cached, so ``FixedMatrix[2, 3] is FixedMatrix[2, 3]``, and
every instance of a specialization has exactly that shape.

Same-shape operators require both operands to be instances of the same
specialization. Multiplication accepts any right operand whose ``ROWS``
equals the left operand's ``COLS`` and returns a ``FixedMatrix[R, C2]``.

Square specializations derive from ``FixedSquareMatrix``, which carries the
elimination kernel. Non-square specializations do not have ``determinant``,
``inverse``, ``reduced_row_echelon_form`` or ``identity`` at all.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from typing import ClassVar

from oasis_matrix.dense import elimination
from oasis_matrix.dense import row_major
from oasis_matrix.dense.dense_matrix import DenseMatrix
from oasis_matrix.dense.matrix_errors import MatrixValueError
from oasis_matrix.dense.matrix_errors import ShapeMismatchError
from oasis_matrix.dense.row_major import Buffer
from oasis_matrix.dense.row_major import ElementFunction


_SPECIALIZATIONS: dict[tuple[int, int], type[FixedMatrix]] = {}


def _shape_key(shape: object) -> tuple[int, int]:
    if not isinstance(shape, tuple) or len(shape) != 2:
        raise MatrixValueError("FixedMatrix requires a [rows, cols] shape")
    rows, cols = shape
    row_major.validate_dims(rows, cols, "FixedMatrix")
    return int(rows), int(cols)


def specialize(rows: int, cols: int) -> type[FixedMatrix]:
    """Return the cached ``FixedMatrix`` class for an ``rows x cols`` shape."""
    key: tuple[int, int] = _shape_key((rows, cols))
    cls: type[FixedMatrix] | None = _SPECIALIZATIONS.get(key)
    if cls is None:
        base: type[FixedMatrix] = FixedSquareMatrix if key[0] == key[1] else FixedMatrix
        name: str = f"FixedMatrix[{key[0]}, {key[1]}]"
        cls = type(
            name,
            (base,),
            {
                "__slots__": (),
                "__module__": __name__,
                "__qualname__": name,
                "ROWS": key[0],
                "COLS": key[1],
            },
        )
        _SPECIALIZATIONS[key] = cls
    return cls


def _rebuild(rows: int, cols: int, values: Buffer) -> FixedMatrix:
    return specialize(rows, cols)._from_buffer(values)


class FixedMatrix(DenseMatrix):
    """Dense matrix with its row and column counts fixed by its type."""

    __slots__ = ()

    # Shape of the specialization, None on the unspecialized base classes
    ROWS: ClassVar[int | None] = None
    COLS: ClassVar[int | None] = None

    def __class_getitem__(cls, shape: tuple[int, int]) -> type[FixedMatrix]:
        if cls.ROWS is not None:
            raise MatrixValueError(f"{cls.__name__} is already specialized")
        key: tuple[int, int] = _shape_key(shape)
        if cls is FixedSquareMatrix and key[0] != key[1]:
            raise ShapeMismatchError("FixedSquareMatrix requires rows == cols")
        return specialize(*key)

    def __init__(self, rows: Sequence[Sequence[float]]) -> None:
        """Initialize from a nested literal matching the specialized shape."""
        expected: tuple[int, int] = type(self)._require_shape()
        values: Buffer
        n_rows: int
        n_cols: int
        values, n_rows, n_cols = row_major.flatten_rows(rows)
        # An empty literal carries no column count
        if n_rows == 0 and expected[0] == 0:
            n_cols = expected[1]
        if (n_rows, n_cols) != expected:
            raise ShapeMismatchError(
                f"literal has shape {n_rows}x{n_cols}, "
                f"expected {expected[0]}x{expected[1]}"
            )
        self._values = values

    @classmethod
    def _require_shape(cls) -> tuple[int, int]:
        if cls.ROWS is None or cls.COLS is None:
            raise MatrixValueError(
                "FixedMatrix must be specialized, use FixedMatrix[rows, cols] "
                "or FixedMatrix.from_rows"
            )
        return cls.ROWS, cls.COLS

    @classmethod
    def _from_buffer(cls, values: Buffer) -> Any:
        rows, cols = cls._require_shape()
        row_major.validate_buffer(values, rows, cols, cls.__name__)
        matrix: FixedMatrix = object.__new__(cls)
        matrix._values = values
        return matrix

    #
    # Construction
    #

    @classmethod
    def zero(cls) -> Any:
        """Return the zero matrix of this shape."""
        rows, cols = cls._require_shape()
        return cls._from_buffer(row_major.zeros(rows, cols))

    @classmethod
    def generate(cls, f: ElementFunction) -> Any:
        """Return the matrix whose entry (r, c) is ``f(r, c)``."""
        rows, cols = cls._require_shape()
        return cls._from_buffer(row_major.generate(rows, cols, f))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Any:
        """Build a matrix from a nested literal.

        On the unspecialized class the shape is inferred from the literal and
        the matching specialization is returned. On a specialization the
        literal must match its shape.
        """
        if cls.ROWS is None:
            values: Buffer
            n_rows: int
            n_cols: int
            values, n_rows, n_cols = row_major.flatten_rows(rows)
            if cls is FixedSquareMatrix and n_rows != n_cols:
                raise ShapeMismatchError(
                    f"literal has shape {n_rows}x{n_cols}, expected a square matrix"
                )
            return specialize(n_rows, n_cols)._from_buffer(values)
        return cls(rows)

    #
    # DenseMatrix hooks
    #

    @property
    def rows(self) -> int:
        return type(self)._require_shape()[0]

    @property
    def cols(self) -> int:
        return type(self)._require_shape()[1]

    def _wrap(self, rows: int, cols: int, values: Buffer) -> Any:
        return specialize(rows, cols)._from_buffer(values)

    def _same_kind(self, other: DenseMatrix) -> bool:
        return isinstance(other, FixedMatrix)

    def _check_same_shape(self, other: DenseMatrix, operation: str) -> None:
        if type(other) is not type(self):
            raise ShapeMismatchError(
                f"cannot {operation} {type(self).__name__} and {type(other).__name__}"
            )

    def _check_inner_dimension(self, other: DenseMatrix) -> None:
        if type(other).ROWS != type(self).COLS:  # type: ignore[attr-defined]
            raise ShapeMismatchError(
                f"cannot multiply {type(self).__name__} by {type(other).__name__}"
            )

    def __reduce__(self) -> tuple[Any, ...]:
        return _rebuild, (self.rows, self.cols, list(self._values))


class FixedSquareMatrix(FixedMatrix):
    """Square fixed-shape matrix with the elimination kernel."""

    __slots__ = ()

    @property
    def n(self) -> int:
        """Return the matrix dimension."""
        return self.rows

    @classmethod
    def identity(cls) -> Any:
        """Return the identity matrix of this shape."""
        rows, _ = cls._require_shape()
        return cls._from_buffer(row_major.identity(rows))

    def determinant(self) -> float:
        """Return the determinant, 0.0 for singular matrices."""
        return elimination.determinant(self._values, self.n)

    def reduced_row_echelon_form(self) -> Any:
        """Return the upper triangular reduction, or None if singular.

        Pivots are not normalized and entries above them are kept, see
        ``oasis_matrix.dense.elimination``.
        """
        reduced: Buffer | None = elimination.reduced_row_echelon_form(
            self._values, self.n
        )
        if reduced is None:
            return None
        return type(self)._from_buffer(reduced)

    def inverse(self) -> Any:
        """Return the inverse, or None if the matrix is singular."""
        inverted: Buffer | None = elimination.inverse(self._values, self.n)
        if inverted is None:
            return None
        return type(self)._from_buffer(inverted)

    def __imatmul__(self, other: object) -> Any:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        self._check_same_shape(other, "multiply")
        n: int = self.n
        self._values[:] = row_major.mat_mul(self._values, n, n, other._values, n, n)
        return self
