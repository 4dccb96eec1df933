"""Error hierarchy for curve construction and population generation."""

from __future__ import annotations

from typing import Any, Optional


class CurveError(Exception):
    """Base exception for curve-related errors."""

    def __init__(self, message: str, curve: str = ""):
        self.curve = curve
        super().__init__(message)


class InvalidCurveParameterError(CurveError, ValueError):
    """Raised when a curve is constructed with an out-of-domain parameter.

    Attributes:
        parameter: Name of the offending constructor argument.
        value: The rejected value.
    """

    def __init__(
        self,
        message: str,
        parameter: str = "",
        value: Optional[Any] = None,
        **kwargs,
    ):  # type: ignore[override]
        self.parameter = parameter
        self.value = value
        super().__init__(message, **kwargs)


class PopulationSizeError(CurveError, ValueError):
    """Raised when a population is requested below the minimum size.

    Attributes:
        count: The requested population size.
        minimum: Smallest size that still holds one curve of each variant.
    """

    def __init__(self, message: str, count: int = 0, minimum: int = 0, **kwargs):  # type: ignore[override]
        self.count = count
        self.minimum = minimum
        super().__init__(message, **kwargs)


__all__ = [
    "CurveError",
    "InvalidCurveParameterError",
    "PopulationSizeError",
]
