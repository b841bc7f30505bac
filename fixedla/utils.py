# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

EPS: float = 1e-6


def random_mat(cls, low=-10.0, high=10.0, seed=None):
    """Return a matrix of type `cls` filled with uniform float entries."""
    rng = np.random.default_rng(seed)
    n = cls.dim
    return cls.from_array(rng.uniform(low, high, size=(n, n)))


def random_nonsingular(cls, low=-10.0, high=10.0, max_cond=1e3, seed=None):
    """
    Draw random matrices of type `cls` until one has a determinant that
    is not approximately zero and a condition number below `max_cond`

    Returns
    -------
    Matrix with float entries
    """
    rng = np.random.default_rng(seed)
    n = cls.dim
    while True:
        A = rng.uniform(low, high, size=(n, n))
        # keep M * inv(M) within EPS of the identity
        if abs(np.linalg.det(A)) >= EPS and np.linalg.cond(A) < max_cond:
            return cls.from_array(A)
