"""Pipeline configuration.

Defaults reproduce the reference run: 100 curves with parameters drawn from
[0.1, 42.0], evaluated at t = pi/4, radii summed sequentially.

Environment variables (read by :meth:`PipelineConfig.from_env`):
    CURVE_KIT_COUNT: Population size.
    CURVE_KIT_SEED: Integer seed for the random source.
    CURVE_KIT_STRATEGY: Reduction strategy (sequential, parallel).
    CURVE_KIT_WORKERS: Thread pool size for the parallel strategy.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from curve_kit.curves.errors import PopulationSizeError
from curve_kit.curves.factory import BUILTIN_VARIANTS, DEFAULT_HIGH, DEFAULT_LOW
from curve_kit.pipeline.reduce import DEFAULT_GRAIN_SIZE, resolve_strategy

DEFAULT_COUNT: int = 100
DEFAULT_T: float = math.pi / 4


@dataclass
class PipelineConfig:
    """Configuration for a generate → extract → reduce run.

    Attributes:
        count: Number of curves to generate (at least 3).
        t: Parameter value at which curves are evaluated for the report.
        low: Lower bound for random shape parameters.
        high: Upper bound for random shape parameters.
        seed: Random seed. ``None`` seeds from OS entropy.
        strategy: Radius reduction strategy name.
        grain_size: Leaf size for the parallel strategy.
        max_workers: Thread pool size for the parallel strategy.
    """

    count: int = DEFAULT_COUNT
    t: float = DEFAULT_T
    low: float = DEFAULT_LOW
    high: float = DEFAULT_HIGH
    seed: Optional[int] = None
    strategy: str = "sequential"
    grain_size: int = DEFAULT_GRAIN_SIZE
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        minimum = len(BUILTIN_VARIANTS)
        if self.count < minimum:
            raise PopulationSizeError(
                f"count must be at least {minimum}, got {self.count}",
                count=self.count,
                minimum=minimum,
            )
        if not (0 < self.low < self.high):
            raise ValueError("parameter range must satisfy 0 < low < high")
        if self.grain_size < 1:
            raise ValueError("grain_size must be at least 1")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be positive")
        self.strategy = resolve_strategy(self.strategy).value

    @classmethod
    def from_env(cls, **overrides: Any) -> PipelineConfig:
        """Build a config from ``CURVE_KIT_*`` variables, then *overrides*.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        kwargs: Dict[str, Any] = {}
        count = os.getenv("CURVE_KIT_COUNT")
        if count:
            kwargs["count"] = _parse_int("CURVE_KIT_COUNT", count)
        seed = os.getenv("CURVE_KIT_SEED")
        if seed:
            kwargs["seed"] = _parse_int("CURVE_KIT_SEED", seed)
        strategy = os.getenv("CURVE_KIT_STRATEGY")
        if strategy:
            kwargs["strategy"] = strategy.strip().lower()
        workers = os.getenv("CURVE_KIT_WORKERS")
        if workers:
            kwargs["max_workers"] = _parse_int("CURVE_KIT_WORKERS", workers)

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


__all__ = [
    "PipelineConfig",
    "DEFAULT_COUNT",
    "DEFAULT_T",
]
