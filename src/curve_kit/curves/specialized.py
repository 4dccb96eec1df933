"""Concrete curve variants: Circle, Ellipse and Helix.

Mathematical Foundation:
    Circle(r):     P(t) = (r cos t, r sin t, 0)
                   P'(t) = (-r sin t, r cos t, 0)
    Ellipse(a, b): P(t) = (a cos t, b sin t, 0)
                   P'(t) = (-a sin t, b cos t, 0)
    Helix(r, p):   P(t) = (r cos t, r sin t, p t)
                   P'(t) = (-r sin t, r cos t, p)

    The parameter t is unrestricted; the trigonometric terms wrap every 2*pi.
    A helix with step p = 0 traces its base circle repeatedly.
"""

from __future__ import annotations

import math
import random
from typing import Tuple

from curve_kit.core.vector import Vector3

from .base import Curve


class Circle(Curve):
    """Circle of radius *r* centred on the origin in the XY plane."""

    __slots__ = ("_radius",)

    NAME = "Circle"

    def __init__(self, radius: float) -> None:
        """Initialize circle.

        Args:
            radius: Circle radius, strictly positive.

        Raises:
            InvalidCurveParameterError: If *radius* is not positive and finite.
        """
        self._init_field("_radius", self._require_positive("radius", radius))

    @property
    def radius(self) -> float:
        return self._radius

    def get_radius(self) -> float:
        """Construction-time radius."""
        return self._radius

    def get_name(self) -> str:
        return self.NAME

    def get_point(self, t: float) -> Vector3:
        r = self._radius
        return Vector3(r * math.cos(t), r * math.sin(t), 0.0)

    def get_first_derivative(self, t: float) -> Vector3:
        r = self._radius
        return Vector3(-r * math.sin(t), r * math.cos(t), 0.0)

    @classmethod
    def random(cls, rng: random.Random, low: float, high: float) -> Circle:
        return cls(rng.uniform(low, high))

    def parameters(self) -> Tuple[Tuple[str, float], ...]:
        return (("radius", self._radius),)


class Ellipse(Curve):
    """Axis-aligned ellipse with semi-axes *a* (along X) and *b* (along Y).

    The semi-axes are independent; ``a < b`` is allowed.
    """

    __slots__ = ("_a", "_b")

    NAME = "Ellipse"

    def __init__(self, a: float, b: float) -> None:
        """Initialize ellipse.

        Args:
            a: Semi-axis along X, strictly positive.
            b: Semi-axis along Y, strictly positive.

        Raises:
            InvalidCurveParameterError: If either semi-axis is not positive and finite.
        """
        self._init_field("_a", self._require_positive("a", a))
        self._init_field("_b", self._require_positive("b", b))

    @property
    def semi_axis_a(self) -> float:
        return self._a

    @property
    def semi_axis_b(self) -> float:
        return self._b

    def get_name(self) -> str:
        return self.NAME

    def get_point(self, t: float) -> Vector3:
        return Vector3(self._a * math.cos(t), self._b * math.sin(t), 0.0)

    def get_first_derivative(self, t: float) -> Vector3:
        return Vector3(-self._a * math.sin(t), self._b * math.cos(t), 0.0)

    @classmethod
    def random(cls, rng: random.Random, low: float, high: float) -> Ellipse:
        a = rng.uniform(low, high)
        b = rng.uniform(low, high)
        return cls(a, b)

    def parameters(self) -> Tuple[Tuple[str, float], ...]:
        return (("a", self._a), ("b", self._b))


class Helix(Curve):
    """Circular helix of radius *r* around the Z axis.

    The step *p* is the rise along Z per unit of t (a full turn rises
    ``2*pi*p``). Any finite step is accepted, including zero and negative
    values.
    """

    __slots__ = ("_radius", "_step")

    NAME = "Helix"

    def __init__(self, radius: float, step: float) -> None:
        """Initialize helix.

        Args:
            radius: Distance from the Z axis, strictly positive.
            step: Rise along Z per unit of t.

        Raises:
            InvalidCurveParameterError: If *radius* is not positive and finite,
                or *step* is not finite.
        """
        self._init_field("_radius", self._require_positive("radius", radius))
        self._init_field("_step", self._require_finite("step", step))

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def step(self) -> float:
        return self._step

    def get_name(self) -> str:
        return self.NAME

    def get_point(self, t: float) -> Vector3:
        r = self._radius
        return Vector3(r * math.cos(t), r * math.sin(t), self._step * t)

    def get_first_derivative(self, t: float) -> Vector3:
        r = self._radius
        return Vector3(-r * math.sin(t), r * math.cos(t), self._step)

    @classmethod
    def random(cls, rng: random.Random, low: float, high: float) -> Helix:
        radius = rng.uniform(low, high)
        step = rng.uniform(low, high)
        return cls(radius, step)

    def parameters(self) -> Tuple[Tuple[str, float], ...]:
        return (("radius", self._radius), ("step", self._step))


__all__ = ["Circle", "Ellipse", "Helix"]
