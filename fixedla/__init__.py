# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
fixedla
=======

Fixed-size linear algebra: vectors, points and square matrices of
dimension 1, 2 and 3 with closed-form determinant, inverse, transpose
and products, generic over the scalar type (ints, floats, fractions,
decimals, NumPy scalars).

Public API
~~~~~~~~~~
- Types
    - `Vec1`, `Vec2`, `Vec3`, `Pnt1`, `Pnt2`, `Pnt3`
    - `Mat1`, `Mat2`, `Mat3`
- Matrix functions
    - `det`, `adj`, `inv`, `is_invertible`, `transpose`
- Scalar contracts
    - `approx_eq`, `approx_eq_eps`, `approx_epsilon`, `absolute`
    - `POrdering`, `partial_cmp`, `partial_min`, `partial_max`,
      `partial_clamp`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import fixedla as fl
>>> m = fl.Mat2(4, 7, 2, 6)
>>> m.det()
10
>>> fl.approx_eq(m * fl.inv(m), fl.Mat2.identity())
True
>>> fl.inv(fl.Mat2(1, 2, 2, 4)) is None
True
"""

from importlib.metadata import version as _pkg_version

# ---------------------------------------------------------------------
# Re-export the high-level names users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .mat import Mat1, Mat2, Mat3
from .matrix_functions import adj, det, inv, is_invertible, transpose
from .operations import (
    POrdering,
    absolute,
    approx_eq,
    approx_eq_eps,
    approx_epsilon,
    inf,
    partial_clamp,
    partial_cmp,
    partial_max,
    partial_min,
    sup,
)
from .pnt import Pnt1, Pnt2, Pnt3
from .utils import EPS
from .vec import Vec1, Vec2, Vec3

__all__ = [
    "Vec1",
    "Vec2",
    "Vec3",
    "Pnt1",
    "Pnt2",
    "Pnt3",
    "Mat1",
    "Mat2",
    "Mat3",
    "det",
    "adj",
    "inv",
    "is_invertible",
    "transpose",
    "POrdering",
    "partial_cmp",
    "partial_min",
    "partial_max",
    "partial_clamp",
    "inf",
    "sup",
    "approx_eq",
    "approx_eq_eps",
    "approx_epsilon",
    "absolute",
    "EPS",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show fixedla”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see debug
# records only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
