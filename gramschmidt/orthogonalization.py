# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Gram-Schmidt orthogonalization of a basis and the matching
independence / orthogonality / orthonormality checks.
"""

import logging
from typing import List, Sequence

from .errors import DimensionMismatchError, InvalidArgumentError, ZeroVectorError
from .utils import EPS
from .vector import Vector

logger = logging.getLogger(__name__)


def check_basis(basis: Sequence[Vector]) -> int:
    """
    Make sure `basis` is non-empty and every member shares one dimension.

    Returns
    -------
    dimension : int
        The common dimension of the vectors.
    """
    if len(basis) == 0:
        raise InvalidArgumentError("Basis cannot be empty")
    dimension = basis[0].dimension
    for v in basis[1:]:
        if v.dimension != dimension:
            raise DimensionMismatchError(dimension, v.dimension)
    return dimension


def orthogonalize(basis: Sequence[Vector]) -> List[Vector]:
    """
    Classical Gram-Schmidt, one pass in index order.

    w_0 = v_0
    w_i = v_i - sum_{j<i} proj_{w_j}(...)

    Each projection is taken from the running remainder, not from the
    original v_i, so the subtraction order is significant. The result
    depends on the order of `basis`.

    Parameters
    ----------
    basis : sequence of Vector
        Non-empty, all of one dimension.

    Returns
    -------
    list of Vector
        Same length and dimension as `basis`. A dependent input yields
        (near-)zero members; they are returned as they are.
    """
    if len(basis) == 0:
        raise InvalidArgumentError("Basis cannot be empty")

    orthogonal = [basis[0]]
    for i in range(1, len(basis)):
        current = basis[i]
        for j in range(i):
            current = current.subtract(current.project_onto(orthogonal[j]))
        orthogonal.append(current)
    return orthogonal


def orthonormalize(basis: Sequence[Vector]) -> List[Vector]:
    """
    Orthogonalize, then scale every vector to unit length.

    Raises ZeroVectorError if an orthogonalized vector is exactly zero.
    Nearly dependent input is not detected here; call
    `are_linearly_independent` first.
    """
    return [w.normalize() for w in orthogonalize(basis)]


def are_linearly_independent(vectors: Sequence[Vector], tol: float = EPS) -> bool:
    """True unless orthogonalization collapses some vector below `tol`."""
    try:
        orthogonal = orthogonalize(vectors)
    except ZeroVectorError:
        # an earlier member was exactly zero
        logger.debug("orthogonalization hit an exactly zero vector")
        return False

    for i, w in enumerate(orthogonal):
        if w.is_zero(tol):
            logger.debug("vector %d collapsed below norm %.1e", i, tol)
            return False
    return True


def is_orthogonal(basis: Sequence[Vector], tol: float = EPS) -> bool:
    n = len(basis)
    for i in range(n):
        for j in range(i + 1, n):
            if abs(basis[i].dot(basis[j])) > tol:
                return False
    return True


def is_orthonormal(basis: Sequence[Vector], tol: float = EPS) -> bool:
    if not is_orthogonal(basis, tol):
        return False
    return all(abs(v.norm() - 1.0) <= tol for v in basis)
