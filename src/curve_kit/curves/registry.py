"""Curve variant registry.

Maps variant names to curve classes. The population factory resolves its
variant names through this registry.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Type

from .base import Curve

logger = logging.getLogger("curve_kit.curves")


class CurveRegistry:
    """Lookup of curve classes by variant name.

    Names are kept in registration order; the built-ins register as
    Circle, Ellipse, Helix.
    """

    _curves: Dict[str, Type[Curve]] = {}
    _order: List[str] = []

    @classmethod
    def register(cls, name: str, curve_class: type) -> None:
        """Register a curve class under *name*.

        Re-registering an existing name replaces the class and keeps its
        position in :meth:`list_available`.

        Raises:
            TypeError: If *curve_class* does not inherit from Curve.
        """
        if not isinstance(curve_class, type) or not issubclass(curve_class, Curve):
            raise TypeError(f"{curve_class} must inherit from Curve")
        cls._curves[name] = curve_class
        if name not in cls._order:
            cls._order.append(name)
        logger.debug("Registered curve variant %s", name)

    @classmethod
    def get(cls, name: str) -> Type[Curve]:
        """Get a curve class by name.

        Raises:
            KeyError: If the name is not registered.
        """
        if name not in cls._curves:
            available = ", ".join(cls._order)
            raise KeyError(
                f"Unknown curve variant '{name}'. Available: {available}. "
                f"Register custom variants with CurveRegistry.register()."
            )
        return cls._curves[name]

    @classmethod
    def list_available(cls) -> List[str]:
        """Registered variant names in registration order."""
        return list(cls._order)


# ---------------------------------------------------------------------------
# Register built-in variants
# ---------------------------------------------------------------------------

from .specialized import Circle, Ellipse, Helix  # noqa: E402

CurveRegistry.register(Circle.NAME, Circle)
CurveRegistry.register(Ellipse.NAME, Ellipse)
CurveRegistry.register(Helix.NAME, Helix)


__all__ = ["CurveRegistry"]
