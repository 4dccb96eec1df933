"""curve-kit processing pipeline.

Circle extraction and ordering, radius reduction (sequential or fork-join),
and batch evaluation of curves over many parameter values.
"""

from curve_kit.pipeline.circles import extract_circles, get_circles, sort_by_radius
from curve_kit.pipeline.reduce import (
    DEFAULT_GRAIN_SIZE,
    ReductionStrategy,
    resolve_strategy,
    split_range,
    sum_radii,
    sum_radii_parallel,
    sum_radii_sequential,
)
from curve_kit.pipeline.sampling import sample_derivatives, sample_points

__all__ = [
    "extract_circles",
    "sort_by_radius",
    "get_circles",
    "ReductionStrategy",
    "DEFAULT_GRAIN_SIZE",
    "resolve_strategy",
    "split_range",
    "sum_radii",
    "sum_radii_sequential",
    "sum_radii_parallel",
    "sample_points",
    "sample_derivatives",
]
