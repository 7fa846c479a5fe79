################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense real-valued matrices with fixed or runtime shapes."""

from __future__ import annotations

from oasis_matrix.config.format_params import FormatParams
from oasis_matrix.config.format_params import FormatParamsError
from oasis_matrix.dense.dense_matrix import DenseMatrix
from oasis_matrix.dense.dynamic_matrix import DynamicMatrix
from oasis_matrix.dense.fixed_matrix import FixedMatrix
from oasis_matrix.dense.fixed_matrix import FixedSquareMatrix
from oasis_matrix.dense.matrix_errors import MatrixError
from oasis_matrix.dense.matrix_errors import MatrixValueError
from oasis_matrix.dense.matrix_errors import ShapeMismatchError


__all__ = [
    "DenseMatrix",
    "DynamicMatrix",
    "FixedMatrix",
    "FixedSquareMatrix",
    "FormatParams",
    "FormatParamsError",
    "MatrixError",
    "MatrixValueError",
    "ShapeMismatchError",
]
