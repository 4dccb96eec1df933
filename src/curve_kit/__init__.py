"""curve-kit — parametric curves, random populations and radius reduction.

Models circles, ellipses and 3D helices behind one evaluation contract
(point and first derivative at a parameter t), generates mixed random
populations, and sums the radii of the circles they contain, optionally
with a fork-join parallel reduction.

Quickstart:
    import random
    from curve_kit import generate_curves, get_circles, sum_radii

    curves = generate_curves(100, random.Random(7))
    total = sum_radii(get_circles(curves), "parallel")
"""

from curve_kit._version import __version__
from curve_kit.core import Vector3
from curve_kit.curves import (
    Circle,
    Curve,
    CurveError,
    CurveFactory,
    CurveRegistry,
    Ellipse,
    Helix,
    InvalidCurveParameterError,
    PopulationSizeError,
    generate_curves,
)
from curve_kit.pipeline import (
    ReductionStrategy,
    extract_circles,
    get_circles,
    sample_derivatives,
    sample_points,
    sort_by_radius,
    sum_radii,
)
from curve_kit.config import PipelineConfig
from curve_kit.runner import PipelineResult, run_pipeline

__all__ = [
    "__version__",
    # Core
    "Vector3",
    # Curves
    "Curve",
    "Circle",
    "Ellipse",
    "Helix",
    "CurveRegistry",
    "CurveFactory",
    "generate_curves",
    # Pipeline
    "extract_circles",
    "sort_by_radius",
    "get_circles",
    "ReductionStrategy",
    "sum_radii",
    "sample_points",
    "sample_derivatives",
    "PipelineConfig",
    "PipelineResult",
    "run_pipeline",
    # Errors
    "CurveError",
    "InvalidCurveParameterError",
    "PopulationSizeError",
]
