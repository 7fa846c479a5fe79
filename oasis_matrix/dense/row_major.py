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
Row-major buffer helpers shared by both matrix kinds

Matrices are represented as row-major lists of floats. Element (r, c) for a
matrix with ``cols`` columns is stored at ``data[r * cols + c]``. Every helper
either returns a new list or mutates a list the caller owns; no helper keeps a
reference to its inputs.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable
from collections.abc import Sequence

from oasis_matrix.dense.matrix_errors import MatrixValueError
from oasis_matrix.dense.matrix_errors import ShapeMismatchError


Buffer = list[float]
ElementFunction = Callable[[int, int], float]


def to_float(value: object, name: str) -> float:
    """Return a matrix entry as a float.

    Args:
        value: Real number to convert
        name: Argument name used in error messages

    Returns:
        The value as a double-precision float

    Raises:
        MatrixValueError: If the value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MatrixValueError(f"{name} must be a real number")
    return float(value)


def validate_dims(rows: int, cols: int, name: str) -> None:
    """Ensure row and column counts are non-negative integers."""
    for dim in (rows, cols):
        if isinstance(dim, bool) or not isinstance(dim, numbers.Integral):
            raise MatrixValueError(f"{name} rows and cols must be integers")
        if dim < 0:
            raise MatrixValueError(f"{name} rows and cols must be non-negative")


def validate_buffer(a: Sequence[float], rows: int, cols: int, name: str) -> None:
    """Ensure a buffer holds exactly ``rows * cols`` entries."""
    validate_dims(rows, cols, name)
    expected: int = rows * cols
    if len(a) != expected:
        raise MatrixValueError(f"{name} must have length {expected} for {rows}x{cols}")


def flatten_rows(data: Sequence[Sequence[float]]) -> tuple[Buffer, int, int]:
    """Flatten a nested literal into a row-major buffer.

    Args:
        data: Sequence of rows, each a sequence of real numbers

    Returns:
        Tuple of (buffer, rows, cols)

    Raises:
        ShapeMismatchError: If the rows do not all have the same length
        MatrixValueError: If the literal is not nested or an entry is not real
    """
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise MatrixValueError("rows must be a sequence of rows")

    rows: int = len(data)
    cols: int = 0
    out: Buffer = []
    for r, row in enumerate(data):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise MatrixValueError(f"row {r} must be a sequence of numbers")
        if r == 0:
            cols = len(row)
        elif len(row) != cols:
            raise ShapeMismatchError(
                f"row {r} has length {len(row)}, expected {cols} like row 0"
            )
        for c, value in enumerate(row):
            out.append(to_float(value, f"entry ({r}, {c})"))
    return out, rows, cols


def generate(rows: int, cols: int, f: ElementFunction) -> Buffer:
    """Build a buffer whose entry (r, c) is ``f(r, c)``.

    The function is called exactly once per cell in row-major order.
    """
    validate_dims(rows, cols, "generated matrix")
    return [
        to_float(f(r, c), f"generated entry ({r}, {c})")
        for r in range(rows)
        for c in range(cols)
    ]


def zeros(rows: int, cols: int) -> Buffer:
    """Return a zero-filled buffer."""
    validate_dims(rows, cols, "zero matrix")
    return [0.0] * (rows * cols)


def identity(n: int) -> Buffer:
    """Return the row-major identity buffer of size ``n``."""
    validate_dims(n, n, "identity")
    out: Buffer = [0.0] * (n * n)
    for i in range(n):
        out[i * n + i] = 1.0
    return out


def check_index(rows: int, cols: int, r: int, c: int) -> None:
    """Raise IndexError if (r, c) lies outside the matrix."""
    if r < 0 or r >= rows or c < 0 or c >= cols:
        raise IndexError(f"index ({r}, {c}) out of range for {rows}x{cols} matrix")


def mat_get(a: Buffer, rows: int, cols: int, r: int, c: int) -> float:
    """Return a matrix entry using row-major indexing."""
    check_index(rows, cols, r, c)
    return a[r * cols + c]


def mat_set(a: Buffer, rows: int, cols: int, r: int, c: int, v: float) -> None:
    """Set a matrix entry using row-major indexing."""
    check_index(rows, cols, r, c)
    a[r * cols + c] = v


def row_of(a: Buffer, rows: int, cols: int, r: int) -> Buffer:
    """Return a copy of row ``r``."""
    if r < 0 or r >= rows:
        raise IndexError(f"row {r} out of range for {rows} rows")
    start: int = r * cols
    return a[start : start + cols]


def col_of(a: Buffer, rows: int, cols: int, c: int) -> Buffer:
    """Return a copy of column ``c``."""
    if c < 0 or c >= cols:
        raise IndexError(f"column {c} out of range for {cols} columns")
    return [a[r * cols + c] for r in range(rows)]


def swap_rows(a: Buffer, cols: int, i: int, j: int) -> None:
    """Swap rows ``i`` and ``j`` in place."""
    if i == j:
        return
    base_i: int = i * cols
    base_j: int = j * cols
    row_i: Buffer = a[base_i : base_i + cols]
    a[base_i : base_i + cols] = a[base_j : base_j + cols]
    a[base_j : base_j + cols] = row_i


def mat_transpose(a: Buffer, rows: int, cols: int) -> Buffer:
    """Return a new ``cols x rows`` buffer with entry (c, r) taken from (r, c)."""
    validate_buffer(a, rows, cols, "a")
    return [a[r * cols + c] for c in range(cols) for r in range(rows)]


def mat_add(a: Buffer, b: Buffer) -> Buffer:
    """Add two buffers of the same size element-wise."""
    if len(a) != len(b):
        raise ShapeMismatchError("matrices must have the same length")
    return [ai + bi for ai, bi in zip(a, b)]


def mat_sub(a: Buffer, b: Buffer) -> Buffer:
    """Subtract two buffers of the same size element-wise."""
    if len(a) != len(b):
        raise ShapeMismatchError("matrices must have the same length")
    return [ai - bi for ai, bi in zip(a, b)]


def mat_scale(a: Buffer, s: float) -> Buffer:
    """Scale every entry by a scalar."""
    return [ai * s for ai in a]


def ieee_divide(x: float, s: float) -> float:
    """Divide with IEEE-754 semantics for a zero divisor.

    Python raises ZeroDivisionError for ``x / 0.0``; matrices instead yield
    a signed infinity, or NaN for ``0 / 0`` and ``nan / 0``.
    """
    if s != 0.0:
        return x / s
    if x == 0.0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, s)


def mat_div(a: Buffer, s: float) -> Buffer:
    """Divide every entry by a scalar."""
    return [ieee_divide(ai, s) for ai in a]


def mat_mul(
    a: Buffer,
    a_rows: int,
    a_cols: int,
    b: Buffer,
    b_rows: int,
    b_cols: int,
) -> Buffer:
    """Return the ``a_rows x b_cols`` product of two row-major buffers.

    Cell (r, c) starts at 0.0 and adds ``a[r][k] * b[k][c]`` for k in order.
    A ``ShapeMismatchError`` is raised when ``a_cols`` differs from ``b_rows``.
    """
    validate_buffer(a, a_rows, a_cols, "a")
    validate_buffer(b, b_rows, b_cols, "b")
    if a_cols != b_rows:
        raise ShapeMismatchError(
            f"cannot multiply {a_rows}x{a_cols} by {b_rows}x{b_cols}: "
            "a_cols must match b_rows"
        )
    out: Buffer = []
    for r in range(a_rows):
        a_row: Buffer = a[r * a_cols : (r + 1) * a_cols]
        for c in range(b_cols):
            # Column c of b is every b_cols-th entry starting at c
            out.append(sum((x * y for x, y in zip(a_row, b[c::b_cols])), 0.0))
    return out


def is_identity(a: Buffer, n: int) -> bool:
    """Return True when the buffer is exactly the ``n x n`` identity."""
    return a == identity(n)


def is_diagonal(a: Buffer, n: int) -> bool:
    """Return True when every off-diagonal entry is exactly zero."""
    for r in range(n):
        for c in range(n):
            if r != c and a[r * n + c] != 0.0:
                return False
    return True
