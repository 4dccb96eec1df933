"""Evaluate a curve at many parameter values at once."""

from __future__ import annotations

from typing import Callable

import numpy as np
import numpy.typing as npt

from curve_kit.core.vector import Vector3
from curve_kit.curves.base import Curve


def _as_parameters(ts: npt.ArrayLike) -> np.ndarray:
    params = np.atleast_1d(np.asarray(ts, dtype=np.float64))
    if params.ndim != 1:
        raise ValueError(f"parameter values must be one-dimensional, got shape {params.shape}")
    return params


def _sample(evaluate: Callable[[float], Vector3], ts: npt.ArrayLike) -> np.ndarray:
    params = _as_parameters(ts)
    out = np.empty((params.shape[0], 3), dtype=np.float64)
    for i, t in enumerate(params):
        out[i, :] = evaluate(float(t)).as_tuple()
    return out


def sample_points(curve: Curve, ts: npt.ArrayLike) -> np.ndarray:
    """Positions of *curve* at every value in *ts*.

    Args:
        curve: Curve to evaluate.
        ts: Scalar or one-dimensional array of parameter values.

    Returns:
        Array of shape ``(len(ts), 3)``; row ``i`` is ``curve.get_point(ts[i])``.

    Raises:
        ValueError: If *ts* has more than one dimension.
    """
    return _sample(curve.get_point, ts)


def sample_derivatives(curve: Curve, ts: npt.ArrayLike) -> np.ndarray:
    """First derivatives of *curve* at every value in *ts*, shaped like :func:`sample_points`."""
    return _sample(curve.get_first_derivative, ts)


__all__ = [
    "sample_points",
    "sample_derivatives",
]
