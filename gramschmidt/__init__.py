# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
gramschmidt
===========

Orthogonal and orthonormal bases of R^n from linearly independent
vectors, using the classical Gram-Schmidt process.

Public API
~~~~~~~~~~
- Value type
    - `Vector`
- Gram-Schmidt
    - `orthogonalize`, `orthonormalize`
- Verification
    - `are_linearly_independent`, `is_orthogonal`, `is_orthonormal`
- Errors
    - `GramSchmidtError`, `InvalidArgumentError`,
      `DimensionMismatchError`, `ZeroVectorError`

The console driver lives in `gramschmidt.cli` and the text formatting in
`gramschmidt.display`; neither is needed to use the algorithm.

Example
-------
>>> import gramschmidt as gs
>>> basis = [gs.Vector([1, 0]), gs.Vector([1, 1])]
>>> gs.orthogonalize(basis)
[Vector([1.0, 0.0]), Vector([0.0, 1.0])]
>>> gs.is_orthonormal(gs.orthonormalize(basis))
True
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

from .errors import (
    DimensionMismatchError,
    GramSchmidtError,
    InvalidArgumentError,
    ZeroVectorError,
)
from .orthogonalization import (
    are_linearly_independent,
    check_basis,
    is_orthogonal,
    is_orthonormal,
    orthogonalize,
    orthonormalize,
)
from .utils import EPS, random_independent_basis
from .vector import Vector

__all__ = [
    "Vector",
    "orthogonalize",
    "orthonormalize",
    "are_linearly_independent",
    "is_orthogonal",
    "is_orthonormal",
    "check_basis",
    "EPS",
    "random_independent_basis",
    "GramSchmidtError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "ZeroVectorError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show gramschmidt”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except PackageNotFoundError:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
