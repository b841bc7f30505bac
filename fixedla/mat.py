# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Square matrices of dimension 1, 2 and 3

Each dimension carries its own closed-form determinant, adjugate,
inverse, transpose and products.  Entries are named `m<row><col>`,
1-indexed, and the constructor takes them in row-major order.
"""

import logging
import numbers
import operator
from dataclasses import dataclass
from typing import Any, ClassVar

from .operations import Det, Inv, Transpose, approx_zero, one
from .pnt import Pnt1, Pnt2, Pnt3
from .structure import Col, Record, Row, matrix_index, out_of_range
from .vec import Vec1, Vec2, Vec3

logger = logging.getLogger(__name__)


class MatBase(Record, Row, Col, Det, Inv, Transpose):
    vector_type: ClassVar[type]
    point_type: ClassVar[type]

    @classmethod
    def identity(cls, dtype=float):
        n = cls.dim
        return cls(*(dtype(1) if i == j else dtype(0) for i in range(n) for j in range(n)))

    @classmethod
    def zeros(cls, dtype=float):
        return cls(*(dtype(0) for _ in range(cls.dim * cls.dim)))

    def nrows(self) -> int:
        return self.dim

    def ncols(self) -> int:
        return self.dim

    def _singular(self, det) -> bool:
        logger.debug(f"{type(self).__name__} is singular (det={det}), not inverting")
        return False

    # ---- element-wise algebra ---------------------------------------

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._zip(other, operator.add)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._zip(other, operator.sub)

    def __neg__(self):
        return self._map(operator.neg)

    def __truediv__(self, s):
        if not isinstance(s, numbers.Number):
            return NotImplemented
        return self._map(lambda c: c / s)

    # ---- products ----------------------------------------------------
    # self * other: matrix, column vector or point (rows against operand)
    # other * self: row vector or point (operand against columns)

    def __mul__(self, other):
        if isinstance(other, numbers.Number):
            return self._map(lambda c: c * other)
        return self.__matmul__(other)

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return self._map(lambda c: other * c)
        return self.__rmatmul__(other)

    def __matmul__(self, other):
        if type(other) is type(self):
            return self._mul_mat(other)
        if type(other) in (self.vector_type, self.point_type):
            return self._mul_column(other)
        return NotImplemented

    def __rmatmul__(self, other):
        if type(other) in (self.vector_type, self.point_type):
            return self._mul_row(other)
        return NotImplemented


@dataclass
class Mat1(MatBase):
    m11: Any

    dim = 1
    shape = (1, 1)
    vector_type = Vec1
    point_type = Pnt1

    def det(self):
        return self.m11

    def adj(self) -> "Mat1":
        return Mat1(one(self.m11))

    def inv(self, eps=None) -> bool:
        # the entry itself is tested, not the determinant
        if approx_zero(self.m11, eps):
            return self._singular(self.m11)
        self.m11 = one(self.m11) / self.det()
        return True

    def transpose(self) -> None:
        pass

    def row(self, i: int) -> Vec1:
        i = matrix_index(i)
        if i == 0:
            return Vec1(self.m11)
        raise out_of_range(1, i, "rows")

    def set_row(self, i: int, r: Vec1) -> None:
        i = matrix_index(i)
        if i == 0:
            self.m11 = r.x
        else:
            raise out_of_range(1, i, "rows")

    def col(self, i: int) -> Vec1:
        i = matrix_index(i)
        if i == 0:
            return Vec1(self.m11)
        raise out_of_range(1, i, "cols")

    def set_col(self, i: int, c: Vec1) -> None:
        i = matrix_index(i)
        if i == 0:
            self.m11 = c.x
        else:
            raise out_of_range(1, i, "cols")

    def _mul_mat(self, right: "Mat1") -> "Mat1":
        return Mat1(self.m11 * right.m11)

    def _mul_column(self, v):
        return type(v)(self.m11 * v.x)

    def _mul_row(self, v):
        return type(v)(v.x * self.m11)


@dataclass
class Mat2(MatBase):
    m11: Any
    m12: Any
    m21: Any
    m22: Any

    dim = 2
    shape = (2, 2)
    vector_type = Vec2
    point_type = Pnt2

    def det(self):
        return self.m11 * self.m22 - self.m21 * self.m12

    def adj(self) -> "Mat2":
        return Mat2(self.m22, -self.m12, -self.m21, self.m11)

    def inv(self, eps=None) -> bool:
        det = self.det()
        if approx_zero(det, eps):
            return self._singular(det)
        self._assign([c / det for c in self.adj().components()])
        return True

    def transpose(self) -> None:
        self.m12, self.m21 = self.m21, self.m12

    def row(self, i: int) -> Vec2:
        i = matrix_index(i)
        if i == 0:
            return Vec2(self.m11, self.m12)
        if i == 1:
            return Vec2(self.m21, self.m22)
        raise out_of_range(2, i, "rows")

    def set_row(self, i: int, r: Vec2) -> None:
        i = matrix_index(i)
        if i == 0:
            self.m11, self.m12 = r.x, r.y
        elif i == 1:
            self.m21, self.m22 = r.x, r.y
        else:
            raise out_of_range(2, i, "rows")

    def col(self, i: int) -> Vec2:
        i = matrix_index(i)
        if i == 0:
            return Vec2(self.m11, self.m21)
        if i == 1:
            return Vec2(self.m12, self.m22)
        raise out_of_range(2, i, "cols")

    def set_col(self, i: int, c: Vec2) -> None:
        i = matrix_index(i)
        if i == 0:
            self.m11, self.m21 = c.x, c.y
        elif i == 1:
            self.m12, self.m22 = c.x, c.y
        else:
            raise out_of_range(2, i, "cols")

    def _mul_mat(self, right: "Mat2") -> "Mat2":
        return Mat2(
            self.m11 * right.m11 + self.m12 * right.m21,
            self.m11 * right.m12 + self.m12 * right.m22,

            self.m21 * right.m11 + self.m22 * right.m21,
            self.m21 * right.m12 + self.m22 * right.m22,
        )

    def _mul_column(self, v):
        return type(v)(
            self.m11 * v.x + self.m12 * v.y,
            self.m21 * v.x + self.m22 * v.y,
        )

    def _mul_row(self, v):
        return type(v)(
            v.x * self.m11 + v.y * self.m21,
            v.x * self.m12 + v.y * self.m22,
        )


@dataclass
class Mat3(MatBase):
    m11: Any
    m12: Any
    m13: Any
    m21: Any
    m22: Any
    m23: Any
    m31: Any
    m32: Any
    m33: Any

    dim = 3
    shape = (3, 3)
    vector_type = Vec3
    point_type = Pnt3

    def _minors(self):
        minor_m12_m23 = self.m22 * self.m33 - self.m32 * self.m23
        minor_m11_m23 = self.m21 * self.m33 - self.m31 * self.m23
        minor_m11_m22 = self.m21 * self.m32 - self.m31 * self.m22
        return minor_m12_m23, minor_m11_m23, minor_m11_m22

    def det(self):
        minor_m12_m23, minor_m11_m23, minor_m11_m22 = self._minors()
        return (
            self.m11 * minor_m12_m23
            - self.m12 * minor_m11_m23
            + self.m13 * minor_m11_m22
        )

    def adj(self) -> "Mat3":
        """Transpose of the cofactor matrix."""
        minor_m12_m23, minor_m11_m23, minor_m11_m22 = self._minors()
        return Mat3(
            minor_m12_m23,
            self.m13 * self.m32 - self.m33 * self.m12,
            self.m12 * self.m23 - self.m22 * self.m13,

            -minor_m11_m23,
            self.m11 * self.m33 - self.m31 * self.m13,
            self.m13 * self.m21 - self.m23 * self.m11,

            minor_m11_m22,
            self.m12 * self.m31 - self.m32 * self.m11,
            self.m11 * self.m22 - self.m21 * self.m12,
        )

    def inv(self, eps=None) -> bool:
        det = self.det()
        if approx_zero(det, eps):
            return self._singular(det)
        # every new entry is computed from the original ones before assignment
        self._assign([c / det for c in self.adj().components()])
        return True

    def transpose(self) -> None:
        self.m12, self.m21 = self.m21, self.m12
        self.m13, self.m31 = self.m31, self.m13
        self.m23, self.m32 = self.m32, self.m23

    def row(self, i: int) -> Vec3:
        i = matrix_index(i)
        if i == 0:
            return Vec3(self.m11, self.m12, self.m13)
        if i == 1:
            return Vec3(self.m21, self.m22, self.m23)
        if i == 2:
            return Vec3(self.m31, self.m32, self.m33)
        raise out_of_range(3, i, "rows")

    def set_row(self, i: int, r: Vec3) -> None:
        i = matrix_index(i)
        if i == 0:
            self.m11, self.m12, self.m13 = r.x, r.y, r.z
        elif i == 1:
            self.m21, self.m22, self.m23 = r.x, r.y, r.z
        elif i == 2:
            self.m31, self.m32, self.m33 = r.x, r.y, r.z
        else:
            raise out_of_range(3, i, "rows")

    def col(self, i: int) -> Vec3:
        i = matrix_index(i)
        if i == 0:
            return Vec3(self.m11, self.m21, self.m31)
        if i == 1:
            return Vec3(self.m12, self.m22, self.m32)
        if i == 2:
            return Vec3(self.m13, self.m23, self.m33)
        raise out_of_range(3, i, "cols")

    def set_col(self, i: int, c: Vec3) -> None:
        i = matrix_index(i)
        if i == 0:
            self.m11, self.m21, self.m31 = c.x, c.y, c.z
        elif i == 1:
            self.m12, self.m22, self.m32 = c.x, c.y, c.z
        elif i == 2:
            self.m13, self.m23, self.m33 = c.x, c.y, c.z
        else:
            raise out_of_range(3, i, "cols")

    def _mul_mat(self, right: "Mat3") -> "Mat3":
        return Mat3(
            self.m11 * right.m11 + self.m12 * right.m21 + self.m13 * right.m31,
            self.m11 * right.m12 + self.m12 * right.m22 + self.m13 * right.m32,
            self.m11 * right.m13 + self.m12 * right.m23 + self.m13 * right.m33,

            self.m21 * right.m11 + self.m22 * right.m21 + self.m23 * right.m31,
            self.m21 * right.m12 + self.m22 * right.m22 + self.m23 * right.m32,
            self.m21 * right.m13 + self.m22 * right.m23 + self.m23 * right.m33,

            self.m31 * right.m11 + self.m32 * right.m21 + self.m33 * right.m31,
            self.m31 * right.m12 + self.m32 * right.m22 + self.m33 * right.m32,
            self.m31 * right.m13 + self.m32 * right.m23 + self.m33 * right.m33,
        )

    def _mul_column(self, v):
        return type(v)(
            self.m11 * v.x + self.m12 * v.y + self.m13 * v.z,
            self.m21 * v.x + self.m22 * v.y + self.m23 * v.z,
            self.m31 * v.x + self.m32 * v.y + self.m33 * v.z,
        )

    def _mul_row(self, v):
        return type(v)(
            v.x * self.m11 + v.y * self.m21 + v.z * self.m31,
            v.x * self.m12 + v.y * self.m22 + v.z * self.m32,
            v.x * self.m13 + v.y * self.m23 + v.z * self.m33,
        )
