"""Curve abstract class — the evaluation contract every curve variant fulfils."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Tuple

from curve_kit.core.vector import Vector3

from .errors import InvalidCurveParameterError


class Curve(ABC):
    """Abstract base class for parametric 3D curves.

    Every variant must implement three methods:
    - get_point(t): position at parameter t
    - get_first_derivative(t): analytic d/dt of the position at t
    - get_name(): stable, human-readable variant label

    Variants also provide ``random()`` so the factory can draw a fresh
    instance from a uniform parameter range.

    Instances are read-only after construction and may be shared freely
    between threads.
    """

    __slots__ = ()

    NAME: ClassVar[str] = "Curve"

    # --- Core interface (required) ---

    @abstractmethod
    def get_point(self, t: float) -> Vector3:
        """Return the position on the curve at parameter *t*.

        Args:
            t: Curve parameter. Any real value is accepted.
        """
        ...

    @abstractmethod
    def get_first_derivative(self, t: float) -> Vector3:
        """Return the first derivative of the position at parameter *t*."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Variant label, constant per class."""
        ...

    @classmethod
    @abstractmethod
    def random(cls, rng: random.Random, low: float, high: float) -> Curve:
        """Create an instance with parameters drawn uniformly from [low, high]."""
        ...

    @abstractmethod
    def parameters(self) -> Tuple[Tuple[str, float], ...]:
        """Shape parameters as ``(name, value)`` pairs in constructor order."""
        ...

    # --- Shared behaviour ---

    @property
    def name(self) -> str:
        return self.get_name()

    @classmethod
    def _require_positive(cls, parameter: str, value: float) -> float:
        """Validate a strictly positive, finite shape parameter."""
        value = float(value)
        if not math.isfinite(value) or value <= 0:
            raise InvalidCurveParameterError(
                f"{cls.NAME} {parameter} must be positive and finite, got {value!r}",
                parameter=parameter,
                value=value,
                curve=cls.NAME,
            )
        return value

    @classmethod
    def _require_finite(cls, parameter: str, value: float) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise InvalidCurveParameterError(
                f"{cls.NAME} {parameter} must be finite, got {value!r}",
                parameter=parameter,
                value=value,
                curve=cls.NAME,
            )
        return value

    def _init_field(self, field: str, value: float) -> None:
        object.__setattr__(self, field, value)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return type(self) is type(other) and self.parameters() == other.parameters()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.parameters()))

    def __repr__(self) -> str:
        params = ", ".join(f"{key}={value!r}" for key, value in self.parameters())
        return f"{type(self).__name__}({params})"


__all__ = ["Curve"]
