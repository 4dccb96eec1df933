"""Tests for curve_kit.pipeline.reduce."""

from __future__ import annotations

import math
import random

import pytest

from curve_kit.curves.factory import generate_curves
from curve_kit.curves.specialized import Circle
from curve_kit.pipeline.circles import extract_circles, sort_by_radius
from curve_kit.pipeline.reduce import (
    ReductionStrategy,
    resolve_strategy,
    split_range,
    sum_radii,
    sum_radii_parallel,
    sum_radii_sequential,
)


def _random_circles(n: int, seed: int = 0) -> list:
    rng = random.Random(seed)
    return [Circle(rng.uniform(0.1, 42.0)) for _ in range(n)]


# ---------------------------------------------------------------------------
# split_range
# ---------------------------------------------------------------------------


class TestSplitRange:
    def test_empty(self):
        assert split_range(0, 0, 4) == []

    def test_single_leaf(self):
        assert split_range(0, 4, 4) == [(0, 4)]

    def test_halving(self):
        assert split_range(0, 10, 3) == [(0, 2), (2, 5), (5, 7), (7, 10)]

    @pytest.mark.parametrize("n, grain", [(1, 1), (17, 2), (1000, 64), (1000, 1)])
    def test_leaves_cover_range(self, n, grain):
        leaves = split_range(0, n, grain)
        assert leaves[0][0] == 0
        assert leaves[-1][1] == n
        assert all(a[1] == b[0] for a, b in zip(leaves, leaves[1:]))
        assert all(0 < end - begin <= grain for begin, end in leaves)

    def test_invalid_grain(self):
        with pytest.raises(ValueError, match="grain_size must be at least 1"):
            split_range(0, 10, 0)

    def test_reversed_range(self):
        with pytest.raises(ValueError, match="end must not precede begin"):
            split_range(5, 1, 2)


# ---------------------------------------------------------------------------
# Sequential
# ---------------------------------------------------------------------------


class TestSequential:
    def test_empty(self):
        assert sum_radii_sequential([]) == 0.0

    def test_values(self):
        assert sum_radii_sequential([Circle(1.0), Circle(2.5), Circle(0.5)]) == 4.0

    def test_default_strategy_is_sequential(self):
        circles = _random_circles(20)
        assert sum_radii(circles) == sum_radii_sequential(circles)

    def test_accepts_generators(self):
        assert sum_radii(c for c in [Circle(1.0), Circle(2.0)]) == 3.0


# ---------------------------------------------------------------------------
# Parallel
# ---------------------------------------------------------------------------


class TestParallel:
    @pytest.mark.parametrize("n", [0, 1, 1000])
    def test_agrees_with_sequential(self, n):
        circles = _random_circles(n, seed=n)
        expected = sum_radii_sequential(circles)
        got = sum_radii(circles, ReductionStrategy.PARALLEL)
        assert math.isclose(got, expected, rel_tol=1e-9)

    def test_empty_is_zero(self):
        assert sum_radii_parallel([]) == 0.0

    @pytest.mark.parametrize("grain", [1, 2, 7, 64, 5000])
    @pytest.mark.parametrize("workers", [1, 2, 8])
    def test_independent_of_split_and_workers(self, grain, workers):
        circles = _random_circles(1000, seed=42)
        expected = sum_radii_sequential(circles)
        got = sum_radii_parallel(circles, grain_size=grain, max_workers=workers)
        assert math.isclose(got, expected, rel_tol=1e-9)

    def test_same_split_gives_identical_value(self):
        circles = _random_circles(777, seed=5)
        a = sum_radii_parallel(circles, grain_size=16, max_workers=1)
        b = sum_radii_parallel(circles, grain_size=16, max_workers=8)
        assert a == b

    def test_string_strategy(self):
        circles = _random_circles(100)
        assert math.isclose(sum_radii(circles, "parallel", grain_size=8), sum_radii(circles), rel_tol=1e-9)

    def test_accepts_iterables(self):
        circles = _random_circles(50)
        assert math.isclose(
            sum_radii(iter(circles), "parallel", grain_size=4), sum_radii_sequential(circles), rel_tol=1e-9
        )

    def test_invalid_grain(self):
        with pytest.raises(ValueError, match="grain_size must be at least 1"):
            sum_radii_parallel(_random_circles(3), grain_size=0)

    def test_does_not_mutate_circles(self):
        circles = _random_circles(200)
        radii = [c.get_radius() for c in circles]
        sum_radii_parallel(circles, grain_size=3)
        assert [c.get_radius() for c in circles] == radii


# ---------------------------------------------------------------------------
# Strategy selection
# ---------------------------------------------------------------------------


class TestStrategy:
    def test_resolve_names(self):
        assert resolve_strategy("sequential") is ReductionStrategy.SEQUENTIAL
        assert resolve_strategy("parallel") is ReductionStrategy.PARALLEL
        assert resolve_strategy(ReductionStrategy.PARALLEL) is ReductionStrategy.PARALLEL

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown reduction strategy 'gpu'"):
            sum_radii([], "gpu")


# ---------------------------------------------------------------------------
# Properties over generated populations
# ---------------------------------------------------------------------------


class TestOrderIndependence:
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_sorting_does_not_change_sum(self, seed):
        circles = extract_circles(generate_curves(500, random.Random(seed)))
        assert math.isclose(
            sum_radii(sort_by_radius(circles)), sum_radii(circles), rel_tol=1e-12
        )
