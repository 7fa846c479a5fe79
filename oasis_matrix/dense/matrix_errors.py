################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error types raised by the dense matrix package."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for dense matrix failures."""


class ShapeMismatchError(MatrixError):
    """Raised when operand shapes are incompatible with an operation."""


class MatrixValueError(MatrixError):
    """Raised when matrix dimensions or entries are invalid."""
