# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Free vectors of dimension 1, 2 and 3
"""

import numbers
import operator
from dataclasses import dataclass
from typing import Any

from .operations import Axpy, Outer
from .structure import Record


class VecBase(Record, Axpy, Outer):
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

    def __mul__(self, s):
        # vector * matrix is handled by the matrix's __rmul__
        if not isinstance(s, numbers.Number):
            return NotImplemented
        return self._map(lambda c: c * s)

    def __rmul__(self, s):
        if not isinstance(s, numbers.Number):
            return NotImplemented
        return self._map(lambda c: s * c)

    def __truediv__(self, s):
        if not isinstance(s, numbers.Number):
            return NotImplemented
        return self._map(lambda c: c / s)

    def dot(self, other) -> Any:
        """
        Implements the scalar (dot) product between two vectors.
        """
        self._require_same(other, "dot")
        return sum(a * b for a, b in zip(self.components(), other.components()))

    def axpy(self, a, x) -> None:
        self._require_same(x, "axpy")
        self._assign(c + a * xc for c, xc in zip(self.components(), x.components()))


@dataclass
class Vec1(VecBase):
    x: Any

    dim = 1
    shape = (1,)

    def outer(self, other: "Vec1"):
        self._require_same(other, "take outer product of")
        from .mat import Mat1

        return Mat1(self.x * other.x)


@dataclass
class Vec2(VecBase):
    x: Any
    y: Any

    dim = 2
    shape = (2,)

    def outer(self, other: "Vec2"):
        self._require_same(other, "take outer product of")
        from .mat import Mat2

        return Mat2(
            self.x * other.x, self.x * other.y,
            self.y * other.x, self.y * other.y,
        )  # fmt: skip


@dataclass
class Vec3(VecBase):
    x: Any
    y: Any
    z: Any

    dim = 3
    shape = (3,)

    def outer(self, other: "Vec3"):
        self._require_same(other, "take outer product of")
        from .mat import Mat3

        return Mat3(
            self.x * other.x, self.x * other.y, self.x * other.z,
            self.y * other.x, self.y * other.y, self.y * other.z,
            self.z * other.x, self.z * other.y, self.z * other.z,
        )  # fmt: skip
