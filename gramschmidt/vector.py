# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Immutable real vectors of any dimension.

Every operation returns a new Vector; the stored components are a
read-only float64 array that is never written after construction.
"""

import math
from typing import Iterator

import numpy as np

from .errors import DimensionMismatchError, InvalidArgumentError, ZeroVectorError
from .utils import EPS


class Vector:
    __slots__ = ("_components",)

    # let numpy defer to our operators, e.g. np.float64(2) * v
    __array_ufunc__ = None

    def __init__(self, components):
        try:
            data = np.array(components, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Invalid vector components: {exc}") from exc
        if data.ndim != 1:
            raise InvalidArgumentError(
                f"Vector components must be one-dimensional, got shape {data.shape}"
            )
        data.flags.writeable = False
        self._components = data

    @property
    def dimension(self) -> int:
        return self._components.shape[0]

    @property
    def components(self) -> np.ndarray:
        """A writable copy of the components."""
        return self._components.copy()

    def __len__(self) -> int:
        return self.dimension

    def __getitem__(self, index: int) -> float:
        return float(self._components[index])

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._components)

    def __array__(self, dtype=None, copy=None):
        return np.array(self._components, dtype=dtype, copy=True)

    def __repr__(self) -> str:
        comps = ", ".join(repr(c) for c in self)
        return f"{self.__class__.__name__}([{comps}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dimension == other.dimension and bool(
            np.array_equal(self._components, other._components)
        )

    def __hash__(self) -> int:
        return hash(tuple(self))

    def _check_dimension(self, other: "Vector") -> None:
        if self.dimension != other.dimension:
            raise DimensionMismatchError(self.dimension, other.dimension)

    def dot(self, other: "Vector") -> float:
        """
        Scalar (dot) product, summed left to right in index order.
        """
        self._check_dimension(other)
        result = 0.0
        for p in self._components * other._components:
            result += float(p)
        return result

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def multiply(self, scalar: float) -> "Vector":
        if isinstance(scalar, Vector) or np.ndim(scalar) != 0:
            raise InvalidArgumentError(
                f"Vector can only be multiplied by a scalar, got {type(scalar).__name__}"
            )
        return Vector(self._components * scalar)

    def subtract(self, other: "Vector") -> "Vector":
        self._check_dimension(other)
        return Vector(self._components - other._components)

    def project_onto(self, other: "Vector") -> "Vector":
        """
        Orthogonal projection of this vector onto the line spanned by `other`.

            proj = other * (self . other) / (other . other)

        Raises ZeroVectorError when `other` is exactly the zero vector.
        """
        numerator = self.dot(other)
        denominator = other.dot(other)
        if denominator == 0:
            raise ZeroVectorError("Cannot project onto zero vector")
        return other.multiply(numerator / denominator)

    def normalize(self) -> "Vector":
        """
        Unit vector in the same direction.

        Only an exactly zero norm is rejected; tiny norms are scaled up as-is.
        """
        magnitude = self.norm()
        if magnitude == 0:
            raise ZeroVectorError("Cannot normalize zero vector")
        return self.multiply(1.0 / magnitude)

    def is_zero(self, tol: float = EPS) -> bool:
        return self.norm() < tol

    # operator sugar
    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar) -> "Vector":
        if isinstance(scalar, Vector) or np.ndim(scalar) != 0:
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __matmul__(self, other: "Vector") -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)
