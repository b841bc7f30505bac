# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Structural pieces shared by the fixed-size vectors, points and matrices.
"""

import copy
import dataclasses
import operator
from abc import ABC, abstractmethod
from typing import ClassVar, Tuple

import numpy as np

from .operations import (
    Absolute,
    ApproxEq,
    POrd,
    POrdering,
    absolute,
    approx_eq_eps,
    approx_epsilon,
    inf,
    partial_cmp,
    sup,
)


def out_of_range(dim: int, i, what: str) -> IndexError:
    return IndexError(f"Index out of range: {dim}d matrices do not have {i} {what}.")


def matrix_index(i) -> int:
    """Row/column index as an int; floats and bools are rejected."""
    if isinstance(i, (bool, np.bool_)):
        raise TypeError(f"matrix indices must be integers, not {type(i).__name__}")
    return operator.index(i)


class Record(ApproxEq, Absolute, POrd):
    """
    A plain aggregate of named scalar components.

    Concrete types are dataclasses; the field order is the constructor
    order (row-major for matrices).
    """

    dim: ClassVar[int]
    shape: ClassVar[Tuple[int, ...]]

    # keeps NumPy scalars on the left of an operator from broadcasting
    # over us instead of deferring to our reflected methods
    __array_ufunc__ = None

    def components(self) -> tuple:
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))

    def clone(self):
        return copy.copy(self)

    def _map(self, f):
        return type(self)(*(f(c) for c in self.components()))

    def _zip(self, other, f):
        return type(self)(
            *(f(a, b) for a, b in zip(self.components(), other.components()))
        )

    def _require_same(self, other, what: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot {what} {type(self).__name__} with {type(other).__name__}"
            )

    def _assign(self, values) -> None:
        for f, v in zip(dataclasses.fields(self), values):
            setattr(self, f.name, v)

    # ---- numpy bridge ------------------------------------------------

    def to_array(self, dtype=None) -> np.ndarray:
        return np.array(self.components(), dtype=dtype).reshape(self.shape)

    @classmethod
    def from_array(cls, array):
        """
        Build a value from an array-like of shape `cls.shape`.

        Raises
        ------
        TypeError  : if `array` is not an ndarray, list or tuple
        ValueError : if the shape does not match
        """
        if not isinstance(array, (np.ndarray, list, tuple)):
            raise TypeError("array must be a NumPy ndarray, list or tuple")
        a = np.asarray(array)
        if a.shape != cls.shape:
            raise ValueError(f"{cls.__name__} expects shape {cls.shape}, got {a.shape}")
        # NumPy scalars keep their type, so float32 input keeps a float32 epsilon
        return cls(*a.ravel())

    # ---- scalar contracts, componentwise ----------------------------

    def approx_epsilon(self):
        return approx_epsilon(self.components()[0])

    def approx_eq_eps(self, other, epsilon) -> bool:
        if type(other) is not type(self):
            return False
        return all(
            approx_eq_eps(a, b, epsilon)
            for a, b in zip(self.components(), other.components())
        )

    def __abs__(self):
        return self._map(absolute)

    def partial_cmp(self, other) -> POrdering:
        self._require_same(other, "compare")
        seen = set(
            partial_cmp(a, b) for a, b in zip(self.components(), other.components())
        )
        if POrdering.NOT_COMPARABLE in seen:
            return POrdering.NOT_COMPARABLE
        seen.discard(POrdering.EQUAL)
        if not seen:
            return POrdering.EQUAL
        if len(seen) == 1:
            return seen.pop()
        # some components less, others greater
        return POrdering.NOT_COMPARABLE

    def inf(self, other):
        self._require_same(other, "take inf of")
        return self._zip(other, inf)

    def sup(self, other):
        self._require_same(other, "take sup of")
        return self._zip(other, sup)


class Row(ABC):
    """Access to the rows of a matrix."""

    @abstractmethod
    def nrows(self) -> int:
        ...

    @abstractmethod
    def row(self, i: int):
        ...

    @abstractmethod
    def set_row(self, i: int, r) -> None:
        ...


class Col(ABC):
    """Access to the columns of a matrix."""

    @abstractmethod
    def ncols(self) -> int:
        ...

    @abstractmethod
    def col(self, i: int):
        ...

    @abstractmethod
    def set_col(self, i: int, c) -> None:
        ...
