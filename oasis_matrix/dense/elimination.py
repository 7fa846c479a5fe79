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
Elimination kernel for square row-major matrices

Two reductions live here:

Partial-pivoted Gaussian elimination (``forward_eliminate``) drives the lower
triangle to zero. For column ``k`` the pivot is the row in ``[k, N)`` with the
largest ``|a[i][k]|``, the lowest index winning ties. Every row swap flips the
sign accumulator, so the determinant is

    det(A) = (prod_i U[i][i]) / sign

The reduced form returned by ``reduced_row_echelon_form`` is the upper
triangular ``U`` from this sweep: pivots are not normalized to 1 and entries
above the pivots are left untouched.

Gauss-Jordan elimination (``inverse``) runs on the augmented system
``[A | I]`` with a first-nonzero forward scan for pivots. When the left half
reaches the identity exactly, the right half is ``A^-1``.

All routines copy their input into a local working buffer and never mutate
the caller's data.
"""

from __future__ import annotations

import logging

from oasis_matrix.dense.row_major import Buffer
from oasis_matrix.dense.row_major import identity
from oasis_matrix.dense.row_major import swap_rows
from oasis_matrix.dense.row_major import validate_buffer


_LOG: logging.Logger = logging.getLogger(__name__)


def select_pivot(a: Buffer, n: int, k: int) -> int:
    """Return the pivot row for column ``k``.

    Args:
        a: Square matrix in row-major form
        n: Matrix dimension
        k: Elimination column, also the first candidate row

    Returns:
        Index in ``[k, n)`` of the largest-magnitude entry in column ``k``,
        the first such row on ties
    """
    pivot: int = k
    pivot_abs: float = abs(a[k * n + k])
    for i in range(k + 1, n):
        candidate: float = abs(a[i * n + k])
        if candidate > pivot_abs:
            pivot = i
            pivot_abs = candidate
    return pivot


def forward_eliminate(a: Buffer, n: int) -> tuple[Buffer, float] | None:
    """Reduce a square matrix to upper triangular form.

    Args:
        a: Square matrix in row-major form
        n: Matrix dimension

    Returns:
        Tuple of (reduced matrix, row swap sign), or None when some column
        has no nonzero pivot candidate

    Raises:
        MatrixValueError: If the buffer size is invalid
    """
    validate_buffer(a, n, n, "a")
    reduced: Buffer = list(a)
    sign: float = 1.0

    for k in range(n):
        pivot: int = select_pivot(reduced, n, k)
        if reduced[pivot * n + k] == 0.0:
            _LOG.debug("Singular matrix, no pivot in column %d of %d", k, n)
            return None

        if pivot != k:
            swap_rows(reduced, n, k, pivot)
            sign = -sign

        pivot_base: int = k * n
        for i in range(k + 1, n):
            row_base: int = i * n
            multiplier: float = -reduced[row_base + k] / reduced[pivot_base + k]
            for j in range(k + 1, n):
                reduced[row_base + j] += reduced[pivot_base + j] * multiplier
            # Exact zero below the pivot, no residual rounding noise
            reduced[row_base + k] = 0.0

    return reduced, sign


def determinant(a: Buffer, n: int) -> float:
    """Return the determinant of a square matrix.

    Singular matrices return 0.0, which is their determinant rather than a
    failure.
    """
    result: tuple[Buffer, float] | None = forward_eliminate(a, n)
    if result is None:
        return 0.0

    reduced: Buffer
    sign: float
    reduced, sign = result

    diagonal_product: float = 1.0
    for i in range(n):
        diagonal_product *= reduced[i * n + i]

    return diagonal_product / sign


def reduced_row_echelon_form(a: Buffer, n: int) -> Buffer | None:
    """Return the upper triangular reduction of a square matrix.

    Returns None for singular matrices.
    """
    result: tuple[Buffer, float] | None = forward_eliminate(a, n)
    if result is None:
        return None
    return result[0]


def augment(a: Buffer, n: int) -> Buffer:
    """Return the ``n x 2n`` augmented buffer ``[A | I]``."""
    validate_buffer(a, n, n, "a")
    eye: Buffer = identity(n)
    out: Buffer = []
    for r in range(n):
        out.extend(a[r * n : (r + 1) * n])
        out.extend(eye[r * n : (r + 1) * n])
    return out


def inverse(a: Buffer, n: int) -> Buffer | None:
    """Invert a square matrix with Gauss-Jordan elimination.

    Args:
        a: Square matrix in row-major form
        n: Matrix dimension

    Returns:
        The inverse in row-major form, or None if the matrix is singular

    Raises:
        MatrixValueError: If the buffer size is invalid
    """
    width: int = 2 * n
    augmented: Buffer = augment(a, n)

    pivot: int = 0
    for row in range(n):
        if pivot >= width:
            break

        # Scan down the pivot column, moving right when it is exhausted
        i: int = row
        exhausted: bool = False
        while augmented[i * width + pivot] == 0.0:
            i += 1
            if i == n:
                i = row
                pivot += 1
                if pivot == width:
                    exhausted = True
                    break
        if exhausted:
            _LOG.debug("Gauss-Jordan exhausted pivot columns at row %d of %d", row, n)
            break

        swap_rows(augmented, width, row, i)

        row_base: int = row * width
        divisor: float = augmented[row_base + pivot]
        for col in range(width):
            augmented[row_base + col] /= divisor

        for j in range(n):
            if j == row:
                continue
            other_base: int = j * width
            hold: float = augmented[other_base + pivot]
            for col in range(width):
                augmented[other_base + col] -= hold * augmented[row_base + col]

        pivot += 1

    left: Buffer = []
    right: Buffer = []
    for r in range(n):
        left.extend(augmented[r * width : r * width + n])
        right.extend(augmented[r * width + n : (r + 1) * width])

    if left != identity(n):
        _LOG.debug("Matrix is singular, reduced left half is not the identity")
        return None

    return right
