# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Low level operations on scalars, vectors and matrices.

Scalars are any ``numbers.Number`` (Python ints and floats, fractions,
decimals, NumPy scalars).  Composite types take part in the same
contracts by subclassing the abstract bases defined here.
"""

import copy
import enum
import functools
import numbers
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import Optional

import numpy as np

from .utils import EPS


class POrdering(enum.Enum):
    """Result of a partial ordering."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    NOT_COMPARABLE = "not_comparable"

    def is_eq(self) -> bool:
        return self is POrdering.EQUAL

    def is_lt(self) -> bool:
        return self is POrdering.LESS

    def is_le(self) -> bool:
        return self is POrdering.LESS or self is POrdering.EQUAL

    def is_gt(self) -> bool:
        return self is POrdering.GREATER

    def is_ge(self) -> bool:
        return self is POrdering.GREATER or self is POrdering.EQUAL

    def is_not_comparable(self) -> bool:
        return self is POrdering.NOT_COMPARABLE

    @classmethod
    def from_ordering(cls, ordering: int) -> "POrdering":
        """Build a `POrdering` from a cmp-style int (negative, zero, positive)."""
        if ordering < 0:
            return cls.LESS
        if ordering > 0:
            return cls.GREATER
        return cls.EQUAL

    def to_ordering(self) -> Optional[int]:
        """
        Convert to a cmp-style int: -1, 0 or 1.

        Returns None if `self` is NOT_COMPARABLE.
        """
        if self is POrdering.LESS:
            return -1
        if self is POrdering.EQUAL:
            return 0
        if self is POrdering.GREATER:
            return 1
        return None


# ---------------------------------------------------------------------
# Partial ordering
# ---------------------------------------------------------------------


def partial_cmp(a, b) -> POrdering:
    """
    Compare `a` and `b` using a partial ordering relation.

    Scalars that fail every comparison (NaN) are NOT_COMPARABLE.
    """
    if isinstance(a, POrd):
        return a.partial_cmp(b)
    if a < b:
        return POrdering.LESS
    if a == b:
        return POrdering.EQUAL
    if a > b:
        return POrdering.GREATER
    return POrdering.NOT_COMPARABLE


def partial_le(a, b) -> bool:
    return partial_cmp(a, b).is_le()


def partial_lt(a, b) -> bool:
    return partial_cmp(a, b).is_lt()


def partial_ge(a, b) -> bool:
    return partial_cmp(a, b).is_ge()


def partial_gt(a, b) -> bool:
    return partial_cmp(a, b).is_gt()


def partial_min(a, b):
    """Return the minimum of `a` and `b`, or None if they are not comparable."""
    ordering = partial_cmp(a, b)
    if ordering.is_le():
        return a
    if ordering.is_gt():
        return b
    return None


def partial_max(a, b):
    """Return the maximum of `a` and `b`, or None if they are not comparable."""
    ordering = partial_cmp(a, b)
    if ordering.is_ge():
        return a
    if ordering.is_lt():
        return b
    return None


def partial_clamp(value, lo, hi):
    """
    Clamp `value` between `lo` and `hi`.

    Returns None if `value` is not comparable to `lo` or `hi`.  The
    bounds are never compared with each other.
    """
    v_lo = partial_cmp(value, lo)
    v_hi = partial_cmp(value, hi)

    if v_lo.is_not_comparable() or v_hi.is_not_comparable():
        return None
    if v_lo.is_lt():
        return lo
    if v_hi.is_gt():
        return hi
    return value


def inf(a, b):
    """Infimum of `a` and `b` (componentwise for composites)."""
    if isinstance(a, POrd):
        return a.inf(b)
    return min(a, b)


def sup(a, b):
    """Supremum of `a` and `b` (componentwise for composites)."""
    if isinstance(a, POrd):
        return a.sup(b)
    return max(a, b)


class POrd(ABC):
    """Pointwise ordering operations."""

    @abstractmethod
    def inf(self, other):
        ...

    @abstractmethod
    def sup(self, other):
        ...

    @abstractmethod
    def partial_cmp(self, other) -> POrdering:
        ...

    def partial_le(self, other) -> bool:
        return self.partial_cmp(other).is_le()

    def partial_lt(self, other) -> bool:
        return self.partial_cmp(other).is_lt()

    def partial_ge(self, other) -> bool:
        return self.partial_cmp(other).is_ge()

    def partial_gt(self, other) -> bool:
        return self.partial_cmp(other).is_gt()

    def partial_min(self, other):
        return partial_min(self, other)

    def partial_max(self, other):
        return partial_max(self, other)

    def partial_clamp(self, lo, hi):
        return partial_clamp(self, lo, hi)


# ---------------------------------------------------------------------
# Approximate equality
# ---------------------------------------------------------------------


class ApproxEq(ABC):
    """
    Approximate equality.

    The relation is not transitive: approx_eq(a, b) and approx_eq(b, c)
    say nothing about approx_eq(a, c).
    """

    @abstractmethod
    def approx_epsilon(self):
        """Default epsilon for approximation."""

    @abstractmethod
    def approx_eq_eps(self, other, epsilon) -> bool:
        """Tests approximate equality using a custom epsilon."""

    def approx_eq(self, other) -> bool:
        return self.approx_eq_eps(other, self.approx_epsilon())


@functools.singledispatch
def approx_epsilon(value):
    """Default epsilon for the type of `value`."""
    if isinstance(value, ApproxEq):
        return value.approx_epsilon()
    raise TypeError(f"no default epsilon for {type(value).__name__}")


@approx_epsilon.register(numbers.Number)
def _(value):
    return EPS


@approx_epsilon.register(np.floating)
def _(value):
    return type(value)(EPS)


@approx_epsilon.register(Fraction)
def _(value):
    return Fraction(repr(EPS))


@approx_epsilon.register(Decimal)
def _(value):
    return Decimal(repr(EPS))


def approx_eq_eps(a, b, epsilon) -> bool:
    """True iff |a - b| < epsilon (componentwise for composites)."""
    if isinstance(a, ApproxEq):
        return a.approx_eq_eps(b, epsilon)
    return absolute(a - b) < epsilon


def approx_eq(a, b) -> bool:
    return approx_eq_eps(a, b, approx_epsilon(a))


def approx_zero(n, eps=None) -> bool:
    """approx_eq(n, 0) in the type of `n`, with an optional custom epsilon."""
    if eps is None:
        eps = approx_epsilon(n)
    return approx_eq_eps(n, zero(n), eps)


# ---------------------------------------------------------------------
# Absolute value and identities
# ---------------------------------------------------------------------


class Absolute(ABC):
    """
    Objects having an absolute value.

    Typically, this makes every component of a matrix or vector positive.
    """

    @abstractmethod
    def __abs__(self):
        ...


@functools.singledispatch
def absolute(n):
    """Computes some absolute value of `n`."""
    return abs(n)


@absolute.register(bool)
@absolute.register(np.bool_)
@absolute.register(np.unsignedinteger)
def _(n):
    return n


def zero(like):
    """Additive identity with the type of `like`."""
    return type(like)(0)


def one(like):
    """Multiplicative identity with the type of `like`."""
    return type(like)(1)


# ---------------------------------------------------------------------
# Operation contracts
# ---------------------------------------------------------------------


class Det(ABC):
    """Objects having a determinant. Typically square matrices."""

    @abstractmethod
    def det(self):
        ...


class Inv(ABC):
    """Objects having an inverse. Typically used to implement matrix inverse."""

    @abstractmethod
    def inv(self, eps=None) -> bool:
        """Invert in place; return False and leave `self` untouched if singular."""

    def inv_cpy(self, eps=None):
        """Return the inverse as a new value, or None if singular."""
        res = copy.copy(self)
        if res.inv(eps):
            return res
        return None


class Transpose(ABC):
    """Objects which can be transposed."""

    @abstractmethod
    def transpose(self) -> None:
        ...

    def transpose_cpy(self):
        res = copy.copy(self)
        res.transpose()
        return res


class Outer(ABC):
    """Objects having an outer product."""

    @abstractmethod
    def outer(self, other):
        """Computes the outer product `self * other^T`."""


class Axpy(ABC):
    """Objects implementing the `y = ax + y` operation."""

    @abstractmethod
    def axpy(self, a, x) -> None:
        """Adds `a * x` to `self` in place."""
