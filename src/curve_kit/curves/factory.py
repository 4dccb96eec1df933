"""Random curve population generation.

A population always opens with one curve of each variant, in discriminant
order (Circle, Ellipse, Helix). The remaining slots pick a variant
uniformly at random and draw fresh parameters for it.

The random source is injected so tests can seed it; when omitted a new
``random.Random`` seeded from OS entropy is used.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .base import Curve
from .errors import PopulationSizeError
from .registry import CurveRegistry
from .specialized import Circle, Ellipse, Helix

logger = logging.getLogger(__name__)

DEFAULT_LOW: float = 0.1
"""Lower bound of the uniform parameter distribution."""

DEFAULT_HIGH: float = 42.0
"""Upper bound of the uniform parameter distribution."""

BUILTIN_VARIANTS: Tuple[str, ...] = (Circle.NAME, Ellipse.NAME, Helix.NAME)
"""Variants drawn by default; position is the discriminant."""


class CurveFactory:
    """Factory for creating random curves and mixed populations.

    Example::

        factory = CurveFactory(random.Random(7))
        curves = factory.generate(100)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        low: float = DEFAULT_LOW,
        high: float = DEFAULT_HIGH,
        variants: Optional[Sequence[str]] = None,
    ) -> None:
        """Initialize factory.

        Args:
            rng: Random source. ``None`` creates one seeded from OS entropy.
            low: Lower bound for every shape parameter draw.
            high: Upper bound for every shape parameter draw.
            variants: Registered variant names to draw from, in discriminant
                order. Defaults to :data:`BUILTIN_VARIANTS`; names registered
                later are only drawn when listed here.

        Raises:
            ValueError: If the range is not ``0 < low < high`` or no variants
                are available.
            KeyError: If a variant name is not registered.
        """
        if not (0 < low < high):
            raise ValueError("parameter range must satisfy 0 < low < high")

        names = list(variants) if variants is not None else BUILTIN_VARIANTS
        if not names:
            raise ValueError("at least one curve variant is required")

        self._rng = rng if rng is not None else random.Random()
        self._low = low
        self._high = high
        self._variants = [CurveRegistry.get(name) for name in names]

    @property
    def minimum_count(self) -> int:
        """Smallest population that holds one curve of each variant."""
        return len(self._variants)

    # ------------------------------------------------------------------
    # Single-curve creation
    # ------------------------------------------------------------------

    def create(self, kind: int) -> Curve:
        """Create one curve of the variant at discriminant *kind*.

        Raises:
            IndexError: If *kind* is not a valid discriminant.
        """
        if not 0 <= kind < len(self._variants):
            raise IndexError(f"Curve discriminant {kind} out of range 0..{len(self._variants) - 1}")
        return self._variants[kind].random(self._rng, self._low, self._high)

    def create_random(self) -> Curve:
        """Create one curve of a uniformly chosen variant."""
        return self.create(self._rng.randrange(len(self._variants)))

    # ------------------------------------------------------------------
    # Population creation
    # ------------------------------------------------------------------

    def generate(self, count: int) -> List[Curve]:
        """Generate a mixed population of exactly *count* curves.

        Raises:
            TypeError: If *count* is not an integer.
            PopulationSizeError: If *count* is below :attr:`minimum_count`.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {type(count).__name__}")
        if count < self.minimum_count:
            raise PopulationSizeError(
                f"count must be at least {self.minimum_count} to hold one curve "
                f"of each variant, got {count}",
                count=count,
                minimum=self.minimum_count,
            )

        curves: List[Curve] = [self.create(kind) for kind in range(self.minimum_count)]
        curves.extend(self.create_random() for _ in range(count - self.minimum_count))

        if logger.isEnabledFor(logging.DEBUG):
            tally = Counter(curve.get_name() for curve in curves)
            logger.debug("Generated %d curves: %s", len(curves), dict(tally))
        return curves


def generate_curves(
    count: int,
    rng: Optional[random.Random] = None,
    *,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
) -> List[Curve]:
    """Generate a mixed curve population.

    Args:
        count: Population size, at least 3.
        rng: Optional random source for reproducible populations.
        low: Lower bound for shape parameter draws.
        high: Upper bound for shape parameter draws.
    """
    return CurveFactory(rng, low=low, high=high).generate(count)


__all__ = [
    "CurveFactory",
    "generate_curves",
    "DEFAULT_LOW",
    "DEFAULT_HIGH",
    "BUILTIN_VARIANTS",
]
