"""Plain-text rendering of curve evaluations and the radius sum."""

from __future__ import annotations

from typing import Iterable, List

from curve_kit.core.vector import DEFAULT_PRECISION
from curve_kit.curves.base import Curve

NAME_WIDTH: int = 14


def format_curve(
    curve: Curve,
    t: float,
    *,
    name_width: int = NAME_WIDTH,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """One report line: padded name, point and derivative at *t*.

    Example::

        Circle         point = (1.414214, 1.414214, 0.000000); derivative = (...)
    """
    point = curve.get_point(t).format(precision)
    derivative = curve.get_first_derivative(t).format(precision)
    return f"{curve.get_name():<{name_width}} point = {point}; derivative = {derivative}"


def format_report(title: str, curves: Iterable[Curve], t: float) -> str:
    """Title, one line per curve, and a trailing blank line."""
    lines: List[str] = [title]
    lines.extend(format_curve(curve, t) for curve in curves)
    lines.append("")
    return "\n".join(lines)


def format_radius_sum(total: float) -> str:
    return f"Circles radius_sum: {total:g}"


__all__ = [
    "NAME_WIDTH",
    "format_curve",
    "format_report",
    "format_radius_sum",
]
