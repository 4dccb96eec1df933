"""Immutable 3D point/vector value type used by every curve evaluation.

Curves return positions and first derivatives as ``Vector3`` instances.
Display follows the ``(x, y, z)`` convention with fixed precision so that
reports are stable across platforms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

DEFAULT_PRECISION: int = 6
"""Number of decimals used by ``str(Vector3)``."""


@dataclass(frozen=True)
class Vector3:
    """Three real components (x, y, z).

    Equality and hashing are component-wise. Instances cannot be mutated
    after construction.
    """

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    def dot(self, other: Vector3) -> float:
        """Scalar product with *other*."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Components as a float64 array of shape ``(3,)``."""
        return np.array(self.as_tuple(), dtype=np.float64)

    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        """Render as ``"(x, y, z)"`` with *precision* decimals.

        Raises:
            ValueError: If *precision* is negative.
        """
        if precision < 0:
            raise ValueError("precision must be non-negative")
        return f"({self.x:.{precision}f}, {self.y:.{precision}f}, {self.z:.{precision}f})"

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return self.format()
