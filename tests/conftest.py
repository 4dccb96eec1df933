"""Pytest configuration and shared fixtures for the curve-kit test suite."""

from __future__ import annotations

import random

import pytest

from curve_kit.core.vector import Vector3
from curve_kit.curves.base import Curve
from curve_kit.curves.registry import CurveRegistry
from curve_kit.curves.specialized import Circle, Ellipse, Helix


# ---------------------------------------------------------------------------
# Random sources
# ---------------------------------------------------------------------------


class FixedRandom:
    """Random source replaying fixed value sequences.

    ``uniform`` ignores its bounds and returns the next value from *values*;
    ``randrange`` returns the next value from *kinds*. Both cycle.
    """

    def __init__(self, values=(1.0,), kinds=(0,)):
        self._values = list(values)
        self._kinds = list(kinds)
        self._vi = 0
        self._ki = 0
        self.uniform_calls = 0

    def uniform(self, low, high):
        value = self._values[self._vi % len(self._values)]
        self._vi += 1
        self.uniform_calls += 1
        return value

    def randrange(self, stop):
        kind = self._kinds[self._ki % len(self._kinds)]
        self._ki += 1
        return kind % stop


@pytest.fixture
def seeded_rng():
    """A reproducible ``random.Random``."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for :class:`FixedRandom` sources."""

    def _make(values=(1.0,), kinds=(0,)):
        return FixedRandom(values=values, kinds=kinds)

    return _make


# ---------------------------------------------------------------------------
# Curve fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def unit_circle():
    return Circle(1.0)


@pytest.fixture
def mixed_curves():
    """Hand-built population with circles scattered among other variants."""
    return [
        Circle(5.0),
        Ellipse(2.0, 3.0),
        Helix(1.0, 0.5),
        Circle(1.5),
        Helix(4.0, 2.0),
        Circle(3.25),
        Ellipse(1.0, 1.0),
        Circle(0.75),
    ]


@pytest.fixture
def clean_registry():
    """Save and restore registry state around a test."""
    original_curves = CurveRegistry._curves.copy()
    original_order = CurveRegistry._order.copy()
    yield CurveRegistry
    CurveRegistry._curves = original_curves
    CurveRegistry._order = original_order


class _Line(Curve):
    """Straight line through the origin with a fixed slope in the XY plane."""

    __slots__ = ("_slope",)

    NAME = "Line"

    def __init__(self, slope):
        self._init_field("_slope", self._require_finite("slope", slope))

    def get_name(self):
        return self.NAME

    def get_point(self, t):
        return Vector3(t, self._slope * t, 0.0)

    def get_first_derivative(self, t):
        return Vector3(1.0, self._slope, 0.0)

    @classmethod
    def random(cls, rng, low, high):
        return cls(rng.uniform(low, high))

    def parameters(self):
        return (("slope", self._slope),)


@pytest.fixture
def line_class():
    """A Curve subclass outside the built-in variants."""
    return _Line
