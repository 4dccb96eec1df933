"""Narrowing a mixed curve population to its circles, ordered by radius.

Extracted circles are the same objects as in the source population; no
curve is copied.
"""

from __future__ import annotations

from typing import Iterable, List

from curve_kit.curves.base import Curve
from curve_kit.curves.specialized import Circle


def extract_circles(curves: Iterable[Curve]) -> List[Circle]:
    """Return the circles of *curves* in their original relative order.

    Non-circle curves are skipped. The input is not modified.
    """
    return [curve for curve in curves if isinstance(curve, Circle)]


def sort_by_radius(circles: Iterable[Circle], *, reverse: bool = False) -> List[Circle]:
    """Return a new list of *circles* ordered by radius (ascending by default).

    The order of circles with equal radii is unspecified.
    """
    return sorted(circles, key=Circle.get_radius, reverse=reverse)


def get_circles(curves: Iterable[Curve]) -> List[Circle]:
    """Extract the circles of *curves* and sort them by ascending radius."""
    return sort_by_radius(extract_circles(curves))


__all__ = [
    "extract_circles",
    "sort_by_radius",
    "get_circles",
]
