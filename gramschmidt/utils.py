# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import TYPE_CHECKING, List

import numpy as np

if TYPE_CHECKING:
    from .vector import Vector

# Tolerance for the independence / orthogonality / orthonormality checks.
# Never used inside the vector arithmetic itself.
EPS: float = 1e-10


def random_independent_basis(n, low=-10, high=10, seed=None) -> List["Vector"]:
    """
    Build n linearly independent vectors in R^n from the rows of a
    random, strictly diagonally dominant upper-triangular
    matrix.

    Returns
    -------
    list of Vector, each of dimension n
    """
    from .vector import Vector

    rng = np.random.default_rng(seed)
    U = rng.uniform(low, high, size=(n, n))
    U = np.triu(U)
    # strictly diagonally dominant keeps the rows independent and
    # the basis reasonably well conditioned
    off_diag = np.abs(U).sum(axis=1) - np.abs(np.diag(U))
    diag = off_diag + rng.uniform(1.0, max(abs(low), abs(high), 2.0), size=n)
    signs = rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = signs * diag
    return [Vector(row) for row in U]
