# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import copy
import logging

import numpy as np
import pytest

from fixedla.mat import Mat1, Mat2, Mat3
from fixedla.pnt import Pnt1, Pnt2, Pnt3
from fixedla.utils import random_mat, random_nonsingular
from fixedla.vec import Vec1, Vec2, Vec3

TEST_ITERATIONS = 20
MATS = [Mat1, Mat2, Mat3]
logger = logging.getLogger(__name__)


def _random_operand(cls, rng):
    return cls.from_array(rng.uniform(-10, 10, size=cls.shape))


# ---------------------------------------------------------------------
# Rows and columns
# ---------------------------------------------------------------------


def test_mat3_rows_and_cols():
    m = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m.nrows() == 3
    assert m.ncols() == 3
    assert m.row(0) == Vec3(1, 2, 3)
    assert m.row(2) == Vec3(7, 8, 9)
    assert m.col(0) == Vec3(1, 4, 7)
    assert m.col(1) == Vec3(2, 5, 8)

    m.set_row(1, Vec3(-1, -2, -3))
    assert m == Mat3(1, 2, 3, -1, -2, -3, 7, 8, 9)
    m.set_col(2, Vec3(0, 0, 0))
    assert m == Mat3(1, 2, 0, -1, -2, 0, 7, 8, 0)


def test_mat2_rows_and_cols():
    m = Mat2(1, 2, 3, 4)
    assert m.row(1) == Vec2(3, 4)
    assert m.col(1) == Vec2(2, 4)
    m.set_col(0, Vec2(9, 8))
    assert m == Mat2(9, 2, 8, 4)


def test_mat1_rows_and_cols():
    m = Mat1(5)
    assert m.nrows() == m.ncols() == 1
    assert m.row(0) == m.col(0) == Vec1(5)
    m.set_row(0, Vec1(6))
    assert m == Mat1(6)


@pytest.mark.parametrize("cls", MATS)
def test_row_col_round_trip(cls):
    rng = np.random.default_rng(7)
    for _ in range(TEST_ITERATIONS):
        m = cls.from_array(rng.uniform(-10, 10, size=cls.shape))
        before = m.clone()
        for i in range(cls.dim):
            m.set_row(i, m.row(i))
            m.set_col(i, m.col(i))
        assert m == before
        for i in range(cls.dim):
            np.testing.assert_array_equal(m.row(i).to_array(), m.to_array()[i])
            np.testing.assert_array_equal(m.col(i).to_array(), m.to_array()[:, i])


@pytest.mark.parametrize("cls", MATS)
@pytest.mark.parametrize("bad", [-1, 3, 4, 100])
def test_out_of_range_index(cls, bad):
    m = cls.identity()
    v = cls.vector_type(*([0.0] * cls.dim))
    with pytest.raises(IndexError, match=f"{cls.dim}d matrices do not have {bad} rows"):
        m.row(bad)
    with pytest.raises(IndexError, match="rows"):
        m.set_row(bad, v)
    with pytest.raises(IndexError, match=f"{cls.dim}d matrices do not have {bad} cols"):
        m.col(bad)
    with pytest.raises(IndexError, match="cols"):
        m.set_col(bad, v)
    assert m == cls.identity()


def test_out_of_range_on_smaller_dimensions():
    with pytest.raises(IndexError):
        Mat1(1).row(1)
    with pytest.raises(IndexError):
        Mat2(1, 2, 3, 4).col(2)


@pytest.mark.parametrize("bad", [1.0, True, np.bool_(False), "1"])
def test_non_integer_index_raises(bad):
    m = Mat2(1, 2, 3, 4)
    with pytest.raises(TypeError):
        m.row(bad)
    with pytest.raises(TypeError):
        m.col(bad)
    with pytest.raises(TypeError):
        m.set_row(bad, Vec2(0, 0))
    with pytest.raises(TypeError):
        m.set_col(bad, Vec2(0, 0))
    assert m == Mat2(1, 2, 3, 4)


def test_numpy_integer_index():
    m = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m.row(np.int64(1)) == Vec3(4, 5, 6)
    assert m.col(np.uint8(2)) == Vec3(3, 6, 9)


# ---------------------------------------------------------------------
# Inversion in place
# ---------------------------------------------------------------------


@pytest.mark.parametrize(
    "m",
    [
        Mat1(0),
        Mat2(1, 2, 2, 4),
        Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9),
        Mat3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0 + 1e-9),
    ],
)
def test_singular_inv_leaves_matrix_unchanged(m):
    before = m.clone()
    assert m.inv() is False
    assert m == before
    assert m.inv_cpy() is None


def test_mat1_inv_tests_entry_against_zero():
    m = Mat1(4.0)
    assert m.inv()
    assert m == Mat1(0.25)

    m = Mat1(5e-7)
    assert not m.inv()
    assert m.inv(eps=1e-9)
    assert m.m11 == pytest.approx(2e6)


def test_mat2_inv_in_place():
    m = Mat2(4, 7, 2, 6)
    assert m.inv()
    assert m.approx_eq(Mat2(0.6, -0.7, -0.2, 0.4))


@pytest.mark.parametrize("cls", MATS)
def test_inv_in_place_agrees_with_copy(cls):
    for i in range(TEST_ITERATIONS):
        m = random_nonsingular(cls, seed=i)
        copied = m.inv_cpy()
        assert m.inv()
        assert m == copied


def test_mat3_inv_uses_original_entries():
    m = Mat3(2.0, 1.0, 0.0, 1.0, 3.0, 1.0, 0.0, 1.0, 4.0)
    expected = np.linalg.inv(m.to_array())
    assert m.inv()
    np.testing.assert_allclose(m.to_array(), expected, rtol=1e-12, atol=1e-12)


# ---------------------------------------------------------------------
# Transpose
# ---------------------------------------------------------------------


def test_transpose_in_place():
    m = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    m.transpose()
    assert m == Mat3(1, 4, 7, 2, 5, 8, 3, 6, 9)

    m = Mat2(1, 2, 3, 4)
    m.transpose()
    assert m == Mat2(1, 3, 2, 4)

    m = Mat1(1)
    m.transpose()
    assert m == Mat1(1)


@pytest.mark.parametrize("cls", MATS)
def test_transpose_cpy(cls):
    m = random_mat(cls, seed=3)
    before = m.clone()
    t = m.transpose_cpy()
    assert m == before
    assert t.transpose_cpy() == m
    for i in range(cls.dim):
        assert t.row(i) == m.col(i)


# ---------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------


@pytest.mark.parametrize("cls", MATS)
def test_products_match_numpy(cls):
    rng = np.random.default_rng(11)
    for _ in range(TEST_ITERATIONS):
        a = random_mat(cls, seed=int(rng.integers(1 << 31)))
        b = random_mat(cls, seed=int(rng.integers(1 << 31)))
        v = _random_operand(cls.vector_type, rng)
        p = _random_operand(cls.point_type, rng)
        A, B = a.to_array(), b.to_array()

        np.testing.assert_allclose((a * b).to_array(), A @ B, rtol=1e-12, atol=1e-9)
        np.testing.assert_allclose((a @ b).to_array(), A @ B, rtol=1e-12, atol=1e-9)
        np.testing.assert_allclose((a * v).to_array(), A @ v.to_array(), rtol=1e-12, atol=1e-9)
        np.testing.assert_allclose((v * a).to_array(), v.to_array() @ A, rtol=1e-12, atol=1e-9)
        np.testing.assert_allclose((a * p).to_array(), A @ p.to_array(), rtol=1e-12, atol=1e-9)
        np.testing.assert_allclose((p * a).to_array(), p.to_array() @ A, rtol=1e-12, atol=1e-9)


def test_product_result_types():
    m = Mat3.identity()
    assert type(m * Vec3(1, 2, 3)) is Vec3
    assert type(Vec3(1, 2, 3) * m) is Vec3
    assert type(m * Pnt3(1, 2, 3)) is Pnt3
    assert type(Pnt3(1, 2, 3) * m) is Pnt3
    assert type(m * m) is Mat3


def test_matrix_vector_is_not_commutative():
    m = Mat2(1, 2, 3, 4)
    v = Vec2(1, 1)
    assert m * v == Vec2(3, 7)
    assert v * m == Vec2(4, 6)
    assert Pnt2(1, 1) * m == Pnt2(4, 6)
    assert m * Pnt2(1, 1) == Pnt2(3, 7)


@pytest.mark.parametrize(
    "v",
    [Vec1(2), Vec2(1, -2), Vec3(1, -2, 3), Pnt1(2), Pnt2(1, -2), Pnt3(1, -2, 3)],
)
def test_identity_multiplication(v):
    identity = {1: Mat1, 2: Mat2, 3: Mat3}[v.dim].identity(dtype=int)
    assert identity * v == v
    assert v * identity == v


def test_mat3_product():
    a = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    b = Mat3(9, 8, 7, 6, 5, 4, 3, 2, 1)
    assert a * b == Mat3(30, 24, 18, 84, 69, 54, 138, 114, 90)


def test_dimension_mismatch_raises():
    with pytest.raises(TypeError):
        Mat3.identity() * Vec2(1, 2)
    with pytest.raises(TypeError):
        Vec2(1, 2) * Mat3.identity()
    with pytest.raises(TypeError):
        Mat2.identity() * Mat3.identity()
    with pytest.raises(TypeError):
        Mat2.identity() + Mat3.identity()


# ---------------------------------------------------------------------
# Element-wise algebra and construction
# ---------------------------------------------------------------------


def test_scalar_algebra():
    m = Mat2(1, 2, 3, 4)
    assert m * 2 == Mat2(2, 4, 6, 8)
    assert 2 * m == Mat2(2, 4, 6, 8)
    assert m / 2 == Mat2(0.5, 1.0, 1.5, 2.0)
    assert np.float64(2.0) * m == Mat2(2.0, 4.0, 6.0, 8.0)
    assert m + m == m * 2
    assert m - m == Mat2.zeros(dtype=int)
    assert -m == Mat2(-1, -2, -3, -4)


def test_identity_and_zeros():
    assert Mat3.identity() == Mat3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
    assert Mat2.zeros() == Mat2(0.0, 0.0, 0.0, 0.0)
    np.testing.assert_array_equal(Mat3.identity().to_array(), np.eye(3))


def test_clone_is_independent():
    m = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    c = m.clone()
    c.m11 = 100
    assert m.m11 == 1
    d = copy.copy(m)
    d.transpose()
    assert m == Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)


def test_from_array():
    m = Mat2.from_array(np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert m == Mat2(1.0, 2.0, 3.0, 4.0)
    assert Mat2.from_array([[1, 2], [3, 4]]) == Mat2(1, 2, 3, 4)
    with pytest.raises(ValueError):
        Mat2.from_array(np.eye(3))
    with pytest.raises(TypeError):
        Mat2.from_array("1 2 3 4")
