"""curve-kit curve variants.

Exposes the Curve base class, the built-in Circle/Ellipse/Helix variants,
the variant registry, the population factory and the error hierarchy.

Usage:
    from curve_kit.curves import Circle, generate_curves

    circle = Circle(2.0)
    curves = generate_curves(100)
"""

from curve_kit.curves.errors import (
    CurveError,
    InvalidCurveParameterError,
    PopulationSizeError,
)
from curve_kit.curves.base import Curve
from curve_kit.curves.specialized import Circle, Ellipse, Helix
from curve_kit.curves.registry import CurveRegistry
from curve_kit.curves.factory import CurveFactory, generate_curves

__all__ = [
    # Base
    "Curve",
    # Variants
    "Circle",
    "Ellipse",
    "Helix",
    # Registry / factory
    "CurveRegistry",
    "CurveFactory",
    "generate_curves",
    # Errors
    "CurveError",
    "InvalidCurveParameterError",
    "PopulationSizeError",
]
