"""curve-kit core value types.

Exports the 3D vector used for curve positions and derivatives.
"""

from curve_kit.core.vector import DEFAULT_PRECISION, Vector3

__all__ = [
    "Vector3",
    "DEFAULT_PRECISION",
]
