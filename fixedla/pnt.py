# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Affine points of dimension 1, 2 and 3

A point has the same components as the vector of its dimension but
denotes a location: point - point is a vector, point + vector is a
point, and point + point is undefined.
"""

import numbers
import operator
from dataclasses import dataclass
from typing import Any, ClassVar

from .structure import Record
from .vec import Vec1, Vec2, Vec3


class PntBase(Record):
    vector_type: ClassVar[type]

    def __add__(self, v):
        if type(v) is not self.vector_type:
            return NotImplemented
        return self._zip(v, operator.add)

    def __sub__(self, other):
        if type(other) is type(self):
            return self.vector_type(
                *(a - b for a, b in zip(self.components(), other.components()))
            )
        if type(other) is self.vector_type:
            return self._zip(other, operator.sub)
        return NotImplemented

    def __mul__(self, s):
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

    def to_vec(self):
        """The displacement from the origin to this point."""
        return self.vector_type(*self.components())

    @classmethod
    def from_vec(cls, v):
        return cls(*v.components())

    @classmethod
    def origin(cls, dtype=float):
        return cls(*(dtype(0) for _ in range(cls.dim)))


@dataclass
class Pnt1(PntBase):
    x: Any

    dim = 1
    shape = (1,)
    vector_type = Vec1


@dataclass
class Pnt2(PntBase):
    x: Any
    y: Any

    dim = 2
    shape = (2,)
    vector_type = Vec2


@dataclass
class Pnt3(PntBase):
    x: Any
    y: Any
    z: Any

    dim = 3
    shape = (3,)
    vector_type = Vec3
