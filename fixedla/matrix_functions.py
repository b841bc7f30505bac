# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional

from .mat import MatBase

logger = logging.getLogger(__name__)


def _check(m) -> None:
    if not isinstance(m, MatBase):
        raise TypeError(f"expected a Mat1, Mat2 or Mat3, got {type(m).__name__}")


def det(m):
    """
    Closed-form determinant of a fixed-size matrix
    """
    _check(m)
    return m.det()


def adj(m: MatBase) -> MatBase:
    """
    Adjugate (classical adjoint) of a fixed-size matrix.

    Defined for singular matrices too; when det(m) is not approximately
    zero, inv(m) == adj(m) / det(m).
    """
    _check(m)
    return m.adj()


def is_invertible(m: MatBase, eps=None) -> bool:
    _check(m)
    return m.inv_cpy(eps) is not None


def inv(m: MatBase, eps=None) -> Optional[MatBase]:
    """
    Inverse of `m` as a new matrix.

    Returns
    -------
    The inverse, or None if `m` is (approximately) singular.
    """
    _check(m)
    res = m.inv_cpy(eps)
    if res is None:
        logger.debug(f"inv(): {m} has no inverse")
    return res


def transpose(m: MatBase) -> MatBase:
    _check(m)
    return m.transpose_cpy()
