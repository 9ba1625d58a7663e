# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from gramschmidt.errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    ZeroVectorError,
)
from gramschmidt.orthogonalization import (
    are_linearly_independent,
    check_basis,
    is_orthogonal,
    is_orthonormal,
    orthogonalize,
    orthonormalize,
)
from gramschmidt.utils import EPS, random_independent_basis
from gramschmidt.vector import Vector

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)


def _as_matrix(basis):
    """Stack the vectors as columns."""
    return np.column_stack([np.asarray(v) for v in basis])


def test_two_dimensional_example():
    basis = [Vector([1, 0]), Vector([1, 1])]

    w = orthogonalize(basis)
    assert w == [Vector([1, 0]), Vector([0, 1])]
    assert is_orthogonal(w)

    u = orthonormalize(basis)
    assert u == [Vector([1, 0]), Vector([0, 1])]
    assert is_orthonormal(u)


def test_dependent_vectors():
    basis = [Vector([1, 0]), Vector([2, 0])]
    w = orthogonalize(basis)
    assert w[1].norm() < EPS
    assert not are_linearly_independent(basis)


def test_standard_basis_is_unchanged():
    basis = [Vector([1, 0, 0]), Vector([0, 1, 0]), Vector([0, 0, 1])]
    assert orthonormalize(basis) == basis
    assert is_orthonormal(basis)
    assert are_linearly_independent(basis)


def test_first_vector_is_kept():
    basis = [Vector([3, 1, 2]), Vector([1, 1, 1]), Vector([0, 2, 5])]
    w = orthogonalize(basis)
    assert w[0] is basis[0]
    assert len(w) == 3
    assert all(v.dimension == 3 for v in w)


def test_input_is_not_mutated():
    basis = [Vector([3, 1]), Vector([1, 2])]
    snapshot = list(basis)
    orthogonalize(basis)
    orthonormalize(basis)
    assert basis == snapshot


def test_projection_taken_from_running_remainder():
    basis = [Vector([1, 1, 0]), Vector([1, 0, 1]), Vector([0, 1, 1])]
    w = orthogonalize(basis)

    expected = [basis[0]]
    current = basis[1]
    current = current.subtract(current.project_onto(expected[0]))
    expected.append(current)
    current = basis[2]
    current = current.subtract(current.project_onto(expected[0]))
    current = current.subtract(current.project_onto(expected[1]))
    expected.append(current)

    # same evaluation order, so bit-for-bit identical
    assert w == expected
    np.testing.assert_allclose(np.asarray(w[2]), [-2 / 3, 2 / 3, 2 / 3])


def test_empty_basis():
    with pytest.raises(InvalidArgumentError, match="Basis cannot be empty"):
        orthogonalize([])
    with pytest.raises(InvalidArgumentError):
        orthonormalize([])
    with pytest.raises(InvalidArgumentError):
        are_linearly_independent([])


def test_mixed_dimensions():
    basis = [Vector([1, 0]), Vector([1, 1, 1])]
    with pytest.raises(DimensionMismatchError):
        orthogonalize(basis)
    with pytest.raises(DimensionMismatchError):
        check_basis(basis)


def test_check_basis():
    assert check_basis([Vector([1, 2, 3]), Vector([0, 1, 0])]) == 3
    with pytest.raises(InvalidArgumentError):
        check_basis([])


def test_orthonormalize_dependent_vectors_fails():
    with pytest.raises(ZeroVectorError):
        orthonormalize([Vector([1, 2]), Vector([2, 4])])


def test_leading_zero_vector_is_dependent():
    # projecting onto the zero vector is refused; the predicate reports dependence
    basis = [Vector([0, 0]), Vector([1, 1])]
    with pytest.raises(ZeroVectorError):
        orthogonalize(basis)
    assert not are_linearly_independent(basis)


def test_single_vector():
    assert orthogonalize([Vector([2, 0, 0])]) == [Vector([2, 0, 0])]
    assert orthonormalize([Vector([2, 0, 0])]) == [Vector([1, 0, 0])]
    assert are_linearly_independent([Vector([2, 0, 0])])
    assert not are_linearly_independent([Vector([0, 0, 0])])


@pytest.mark.parametrize("n", [2, 3, 5, 10])
def test_random_bases_become_orthonormal(n):
    for i in range(TEST_ITERATIONS):
        logger.debug("============ n=%d iteration %d ============", n, i)
        basis = random_independent_basis(n, seed=1000 * n + i)
        assert are_linearly_independent(basis)

        w = orthogonalize(basis)
        W = _as_matrix(w)
        G = W.T @ W
        # off-diagonal Gram entries relative to the vector lengths
        d = np.sqrt(np.diag(G))
        assert np.allclose(G / np.outer(d, d), np.eye(n), atol=1e-10)

        u = orthonormalize(basis)
        for v in u:
            assert abs(v.norm() - 1.0) <= 1e-10
        assert is_orthonormal(u)


@pytest.mark.parametrize("n", [2, 4, 7])
def test_against_numpy_qr(n):
    """Orthonormal vectors must match NumPy's Q up to column signs."""
    basis = random_independent_basis(n, seed=n)
    A = _as_matrix(basis)
    Q_np, _ = np.linalg.qr(A)

    Q = _as_matrix(orthonormalize(basis))
    signs = np.sign(np.sum(Q * Q_np, axis=0))
    assert np.allclose(Q, Q_np * signs, atol=1e-8)


def test_already_orthogonal_basis_is_preserved():
    basis = [Vector([2, 0, 0]), Vector([0, 0, -3]), Vector([0, 0.5, 0])]
    w = orthogonalize(basis)
    for a, b in zip(w, basis):
        np.testing.assert_allclose(np.asarray(a), np.asarray(b), atol=EPS)


def test_order_matters():
    a, b = Vector([1, 0]), Vector([1, 1])
    forward = orthogonalize([a, b])
    backward = orthogonalize([b, a])
    assert forward != backward
    assert is_orthogonal(forward)
    assert is_orthogonal(backward)
    np.testing.assert_allclose(np.asarray(backward[1]), [0.5, -0.5])


def test_independence_predicate_matches_collapse():
    bases = [
        [Vector([1, 2, 3]), Vector([0, 0, 1]), Vector([2, 4, 6])],
        [Vector([1, 0, 0]), Vector([0, 1, 0]), Vector([1, 1, 0])],
        [Vector([1, 2, 3]), Vector([4, 5, 6]), Vector([7, 8, 10])],
        [Vector([1, 1]), Vector([1, 1 + 1e-3])],
    ]
    for basis in bases:
        collapsed = any(w.norm() < EPS for w in orthogonalize(basis))
        assert are_linearly_independent(basis) is (not collapsed)


def test_is_orthogonal():
    assert is_orthogonal([])
    assert is_orthogonal([Vector([1, 2])])
    assert is_orthogonal([Vector([1, 1]), Vector([1, -1])])
    assert not is_orthogonal([Vector([1, 1]), Vector([1, 0])])
    # within tolerance
    assert is_orthogonal([Vector([1, 0]), Vector([1e-11, 1])])
    assert not is_orthogonal([Vector([1, 0]), Vector([1e-9, 1])])


def test_is_orthonormal():
    assert is_orthonormal([Vector([1, 0]), Vector([0, -1])])
    # orthogonal but not unit length
    assert not is_orthonormal([Vector([2, 0]), Vector([0, 1])])
    # unit length but not orthogonal
    s = 1 / np.sqrt(2)
    assert not is_orthonormal([Vector([1, 0]), Vector([s, s])])
    assert is_orthonormal([Vector([1 + 1e-11, 0]), Vector([0, 1])])


def test_collapse_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="gramschmidt"):
        assert not are_linearly_independent([Vector([1, 1]), Vector([3, 3])])
    assert "collapsed" in caplog.text
