# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by the vector and Gram-Schmidt routines.
"""


class GramSchmidtError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(GramSchmidtError, ValueError):
    """Input is malformed, e.g. an empty basis."""


class DimensionMismatchError(GramSchmidtError, ValueError):
    """Two vectors of different dimension met in a binary operation."""

    def __init__(self, left: int, right: int):
        super().__init__(
            f"Vectors must have the same dimension (got {left} and {right})"
        )
        self.left = left
        self.right = right


class ZeroVectorError(GramSchmidtError, ArithmeticError):
    """An operation needs a direction but was handed the zero vector."""
