"""Summation of circle radii, sequential or fork-join parallel.

Both strategies return the same value up to floating-point rounding. The
parallel path splits the index range in halves until each leaf holds at
most ``grain_size`` circles, sums the leaves on a thread pool, and joins
the partial sums pairwise along the same split tree. Circles are only
read, so no locking is needed.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from curve_kit.curves.specialized import Circle

logger = logging.getLogger(__name__)

DEFAULT_GRAIN_SIZE: int = 64
"""Largest leaf range summed by a single task."""


class ReductionStrategy(str, Enum):
    """How :func:`sum_radii` accumulates."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


_Node = Union["Future[float]", Tuple["_Node", "_Node"]]


def split_range(begin: int, end: int, grain_size: int = DEFAULT_GRAIN_SIZE) -> List[Tuple[int, int]]:
    """Recursively halve ``[begin, end)`` into leaves of at most *grain_size*.

    Returns the leaves in index order. An empty range yields no leaves.

    Raises:
        ValueError: If *grain_size* is below 1 or ``end < begin``.
    """
    _check_grain_size(grain_size)
    if end < begin:
        raise ValueError("end must not precede begin")
    if end == begin:
        return []
    if end - begin <= grain_size:
        return [(begin, end)]
    mid = begin + (end - begin) // 2
    return split_range(begin, mid, grain_size) + split_range(mid, end, grain_size)


def sum_radii_sequential(circles: Iterable[Circle]) -> float:
    """Left-to-right fold of the radii."""
    total = 0.0
    for circle in circles:
        total += circle.get_radius()
    return total


def sum_radii_parallel(
    circles: Sequence[Circle],
    *,
    grain_size: int = DEFAULT_GRAIN_SIZE,
    max_workers: Optional[int] = None,
) -> float:
    """Fork-join sum of the radii on a thread pool.

    Args:
        circles: Circles to sum. Indexed by range, so any sequence works.
        grain_size: Largest range summed sequentially by one task.
        max_workers: Thread pool size. ``None`` uses the executor default.

    Raises:
        ValueError: If *grain_size* is below 1.
    """
    _check_grain_size(grain_size)
    if not isinstance(circles, Sequence):
        circles = list(circles)
    if not circles:
        return 0.0

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        tree = _fork(executor, circles, 0, len(circles), grain_size)
        total = _join(tree)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Parallel radius sum over %d circles in %d leaves",
            len(circles),
            len(split_range(0, len(circles), grain_size)),
        )
    return total


def sum_radii(
    circles: Iterable[Circle],
    strategy: Union[ReductionStrategy, str] = ReductionStrategy.SEQUENTIAL,
    *,
    grain_size: int = DEFAULT_GRAIN_SIZE,
    max_workers: Optional[int] = None,
) -> float:
    """Sum the radii of *circles*. An empty input sums to ``0.0``.

    Args:
        circles: Circles to sum.
        strategy: ``"sequential"`` or ``"parallel"``.
        grain_size: Leaf size for the parallel strategy.
        max_workers: Thread pool size for the parallel strategy.

    Raises:
        ValueError: If *strategy* is unknown or *grain_size* is below 1.
    """
    strategy = resolve_strategy(strategy)
    if strategy is ReductionStrategy.PARALLEL:
        return sum_radii_parallel(
            circles if isinstance(circles, Sequence) else list(circles),
            grain_size=grain_size,
            max_workers=max_workers,
        )
    return sum_radii_sequential(circles)


def resolve_strategy(strategy: Union[ReductionStrategy, str]) -> ReductionStrategy:
    """Coerce a strategy name to :class:`ReductionStrategy`.

    Raises:
        ValueError: If *strategy* is not a known strategy.
    """
    try:
        return ReductionStrategy(strategy)
    except ValueError:
        available = ", ".join(s.value for s in ReductionStrategy)
        raise ValueError(f"Unknown reduction strategy {strategy!r}. Available: {available}") from None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_grain_size(grain_size: int) -> None:
    if grain_size < 1:
        raise ValueError("grain_size must be at least 1")


def _sum_range(circles: Sequence[Circle], begin: int, end: int) -> float:
    total = 0.0
    for i in range(begin, end):
        total += circles[i].get_radius()
    return total


def _fork(
    executor: ThreadPoolExecutor,
    circles: Sequence[Circle],
    begin: int,
    end: int,
    grain_size: int,
) -> _Node:
    if end - begin <= grain_size:
        return executor.submit(_sum_range, circles, begin, end)
    mid = begin + (end - begin) // 2
    return (
        _fork(executor, circles, begin, mid, grain_size),
        _fork(executor, circles, mid, end, grain_size),
    )


def _join(node: _Node) -> float:
    if isinstance(node, Future):
        return node.result()
    left, right = node
    return _join(left) + _join(right)


__all__ = [
    "ReductionStrategy",
    "DEFAULT_GRAIN_SIZE",
    "split_range",
    "sum_radii",
    "sum_radii_sequential",
    "sum_radii_parallel",
    "resolve_strategy",
]
