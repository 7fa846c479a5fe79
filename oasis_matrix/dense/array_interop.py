################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Conversion between dense matrices and numpy arrays."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from oasis_matrix.dense.dense_matrix import DenseMatrix
from oasis_matrix.dense.dynamic_matrix import DynamicMatrix
from oasis_matrix.dense.fixed_matrix import specialize
from oasis_matrix.dense.matrix_errors import MatrixValueError
from oasis_matrix.dense.matrix_errors import ShapeMismatchError
from oasis_matrix.dense.row_major import Buffer


# Signed integer, unsigned integer and floating dtype kinds
_REAL_KINDS: str = "iuf"


def _as_matrix_array(array: Any, name: str) -> NDArray[np.float64]:
    """Coerce an array-like to a 2D float64 array.

    Raises:
        MatrixValueError: If the entries are not real numbers
        ShapeMismatchError: If the array is ragged or not 2D
    """
    try:
        raw: np.ndarray = np.asarray(array)
    except ValueError as err:
        raise ShapeMismatchError(f"{name} must be a rectangular array: {err}") from err
    # Bool, complex, string and object arrays would be silently coerced
    if raw.dtype.kind not in _REAL_KINDS:
        raise MatrixValueError(f"{name} must hold real numbers, got dtype {raw.dtype}")
    mat: NDArray[np.float64] = raw.astype(np.float64)
    if mat.ndim != 2:
        raise ShapeMismatchError(f"{name} must be a 2D array, got {mat.ndim}D")
    return mat


def to_ndarray(matrix: DenseMatrix) -> NDArray[np.float64]:
    """Return a float64 array of shape (rows, cols) holding a copy of the matrix."""
    return np.array(matrix.values(), dtype=np.float64).reshape(matrix.shape)


def dynamic_from_ndarray(array: NDArray[np.float64]) -> DynamicMatrix:
    """Build a DynamicMatrix from a 2D array."""
    mat: NDArray[np.float64] = _as_matrix_array(array, "array")
    rows: int = int(mat.shape[0])
    cols: int = int(mat.shape[1])
    values: Buffer = [float(value) for value in mat.ravel(order="C")]
    return DynamicMatrix.from_values(rows, cols, values)


def fixed_from_ndarray(array: NDArray[np.float64]) -> Any:
    """Build a matrix of the ``FixedMatrix`` specialization matching the array."""
    mat: NDArray[np.float64] = _as_matrix_array(array, "array")
    rows: int = int(mat.shape[0])
    cols: int = int(mat.shape[1])
    values: Buffer = [float(value) for value in mat.ravel(order="C")]
    return specialize(rows, cols)._from_buffer(values)
