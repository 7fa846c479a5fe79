################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for runtime-shaped matrices."""

from __future__ import annotations

import pickle

import numpy as np
import pytest

from oasis_matrix.dense.dynamic_matrix import DynamicMatrix
from oasis_matrix.dense.fixed_matrix import FixedMatrix
from oasis_matrix.dense.matrix_errors import MatrixValueError
from oasis_matrix.dense.matrix_errors import ShapeMismatchError


def test_literal_shape() -> None:
    """A nested literal sets the runtime shape."""
    matrix = DynamicMatrix([[1, 2, 3], [4, 5, 6]])

    assert matrix.shape == (2, 3)
    assert matrix.rows == 2
    assert matrix.cols == 3
    assert matrix.values() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


def test_ragged_literal_raises() -> None:
    """Rows of different lengths are rejected."""
    with pytest.raises(ShapeMismatchError):
        DynamicMatrix([[1, 2], [3, 4, 5]])


def test_from_values() -> None:
    """from_values checks the flat buffer length and dimensions."""
    matrix = DynamicMatrix.from_values(2, 2, [1, 2, 3, 4])
    assert matrix == DynamicMatrix([[1, 2], [3, 4]])
    with pytest.raises(MatrixValueError):
        DynamicMatrix.from_values(2, 2, [1, 2, 3])
    with pytest.raises(MatrixValueError):
        DynamicMatrix.from_values(-1, 2, [])


def test_zero_identity_generate() -> None:
    """Constructors fill the requested shape."""
    assert DynamicMatrix.zero(2, 3).values() == [0.0] * 6
    assert DynamicMatrix.identity(2) == DynamicMatrix([[1, 0], [0, 1]])
    assert DynamicMatrix.generate(2, 2, lambda r, c: r - c) == DynamicMatrix(
        [[0, -1], [1, 0]]
    )


def test_empty_matrix() -> None:
    """A 0x0 matrix is square, has determinant 1 and is its own inverse."""
    empty = DynamicMatrix([])

    assert empty.shape == (0, 0)
    assert empty.is_square()
    assert empty.determinant() == 1.0
    assert empty.inverse() == empty
    assert empty.is_diagonal()
    assert empty.is_scalar_identity_multiple()
    assert str(empty) == "[]"


def test_element_wise_shape_mismatch() -> None:
    """Element-wise operators report both shapes on mismatch."""
    a = DynamicMatrix.zero(2, 3)
    b = DynamicMatrix.zero(3, 2)

    with pytest.raises(ShapeMismatchError, match="different sizes: 2x3 and 3x2"):
        a + b
    with pytest.raises(ShapeMismatchError):
        a - b
    with pytest.raises(ShapeMismatchError):
        a += b


def test_matmul() -> None:
    """A 2x3 by 3x2 product is 2x2."""
    a = DynamicMatrix([[1, 2, 3], [4, 5, 6]])
    b = DynamicMatrix([[7, 8], [9, 10], [11, 12]])

    product = a * b

    assert product.shape == (2, 2)
    assert product == DynamicMatrix([[58, 64], [139, 154]])
    assert a @ b == product


def test_matmul_inner_dimension_mismatch() -> None:
    """Mismatched inner dimensions raise."""
    a = DynamicMatrix.zero(2, 3)
    with pytest.raises(ShapeMismatchError, match="inner dimensions differ"):
        a * a


def test_multiply_by_identity_is_unchanged() -> None:
    """Identity on either side leaves a rectangular matrix unchanged."""
    a = DynamicMatrix([[1.5, -2], [0.25, 8], [3, 3]])
    assert a * DynamicMatrix.identity(2) == a
    assert DynamicMatrix.identity(3) * a == a


def test_scalar_operations() -> None:
    """Scalars scale, divide and negate every entry."""
    a = DynamicMatrix([[1, 2], [3, 4]])

    assert a * 0.5 == DynamicMatrix([[0.5, 1], [1.5, 2]])
    assert 3 * a == DynamicMatrix([[3, 6], [9, 12]])
    assert a / 4 == DynamicMatrix([[0.25, 0.5], [0.75, 1]])
    assert -a == a.scale(-1)


def test_numpy_scalar_on_left() -> None:
    """A numpy scalar on the left dispatches to the matrix."""
    a = DynamicMatrix([[1, 2], [3, 4]])

    result = np.float64(2.0) * a

    assert isinstance(result, DynamicMatrix)
    assert result == DynamicMatrix([[2, 4], [6, 8]])


def test_mixing_kinds_raises_type_error() -> None:
    """Fixed and dynamic matrices do not combine."""
    dynamic = DynamicMatrix([[1, 2], [3, 4]])
    fixed = FixedMatrix[2, 2]([[1, 2], [3, 4]])

    with pytest.raises(TypeError):
        dynamic + fixed
    with pytest.raises(TypeError):
        dynamic * fixed
    with pytest.raises(TypeError):
        dynamic.add(fixed)
    assert dynamic != fixed


def test_non_square_kernel_raises() -> None:
    """Square-only operations raise for non-square matrices."""
    a = DynamicMatrix.zero(2, 3)

    with pytest.raises(ShapeMismatchError):
        a.determinant()
    with pytest.raises(ShapeMismatchError):
        a.inverse()
    with pytest.raises(ShapeMismatchError):
        a.reduced_row_echelon_form()


def test_non_square_predicates_are_false() -> None:
    """Every structural predicate is False for a non-square matrix."""
    a = DynamicMatrix.zero(3, 2)
    assert not a.is_diagonal()
    assert not a.is_symmetric()
    assert not a.is_orthogonal()
    assert not a.is_scalar_identity_multiple()


def test_identity_determinant() -> None:
    """The identity has determinant 1 for every size."""
    for n in range(1, 7):
        assert DynamicMatrix.identity(n).determinant() == 1.0


def test_determinant_and_inverse() -> None:
    """A * inverse(A) is exactly the identity."""
    a = DynamicMatrix([[1, 2], [3, 4]])

    inv = a.inverse()

    assert a.determinant() == pytest.approx(-2.0)
    assert inv == DynamicMatrix([[-2, 1], [1.5, -0.5]])
    assert a * inv == DynamicMatrix.identity(2)


def test_singular_matrix() -> None:
    """Dependent rows give determinant 0 and no inverse."""
    a = DynamicMatrix([[1, 2, 3], [2, 4, 6], [0, 1, 1]])

    assert a.determinant() == 0.0
    assert a.inverse() is None
    assert a.reduced_row_echelon_form() is None


def test_reduced_row_echelon_form() -> None:
    """The reduced form swaps to the larger pivot."""
    reduced = DynamicMatrix([[0, 2], [3, 4]]).reduced_row_echelon_form()
    assert reduced == DynamicMatrix([[3, 4], [0, 2]])


def test_permutation_matrix() -> None:
    """A row swap matrix is orthogonal and self-inverse."""
    swap = DynamicMatrix([[0, 1], [1, 0]])

    assert swap.is_orthogonal()
    assert swap.inverse() == swap


def test_transpose_involution() -> None:
    """Transposing twice returns the original."""
    a = DynamicMatrix([[1, 2, 3], [4, 5, 6]])
    assert a.transpose().shape == (3, 2)
    assert a.transpose().transpose() == a


def test_in_place_operators() -> None:
    """Compound assignment updates the same object."""
    a = DynamicMatrix([[1, 2], [3, 4]])
    original_id: int = id(a)

    a += DynamicMatrix([[1, 1], [1, 1]])
    a *= 2
    a -= DynamicMatrix([[4, 6], [8, 10]])

    assert id(a) == original_id
    assert a == DynamicMatrix.zero(2, 2)


def test_equality_uses_shape() -> None:
    """Equal buffers with different shapes are not equal."""
    row = DynamicMatrix([[1, 2, 3, 4]])
    col = DynamicMatrix([[1], [2], [3], [4]])
    assert row != col
    assert row.values() == col.values()


def test_repr_and_pickle() -> None:
    """repr lists the rows and pickling round-trips."""
    a = DynamicMatrix([[1, 2], [3, 4]])

    restored = pickle.loads(pickle.dumps(a))

    assert repr(a) == "DynamicMatrix([[1.0, 2.0], [3.0, 4.0]])"
    assert restored == a
