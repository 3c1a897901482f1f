"""Tests for range-table normalization."""

from __future__ import annotations

import math

import pytest

from equity_scorer.scoring.normalizer import (
    DEBT_TO_EQUITY_RANGES,
    PE_RANGES,
    PS_RANGES,
    TREND_STRENGTH_RANGES,
    VOLATILITY_RANGES,
    VOLUME_RANGES,
    ScoreRange,
    score_metric,
)


def test_upper_bound_belongs_to_next_range() -> None:
    ranges = [ScoreRange(0, 10, 5), ScoreRange(10, 20, 3)]
    assert score_metric(9.99, ranges) == 5
    assert score_metric(10, ranges) == 3
    assert score_metric(20, ranges) == 0


def test_table_order_decides_first_match() -> None:
    ranges = [ScoreRange(0, 10, 1), ScoreRange(0, 10, 2)]
    assert score_metric(5, ranges) == 1


def test_closed_range_includes_its_maximum() -> None:
    assert score_metric(100, [ScoreRange(0, 100, 10, closed=True)]) == 10
    assert score_metric(100.01, [ScoreRange(0, 100, 10, closed=True)]) == 0


def test_unbounded_upper_range() -> None:
    assert score_metric(1e12, VOLUME_RANGES) == 15
    assert score_metric(math.inf, [ScoreRange(0, math.inf, 1)]) == 1


def test_no_match_returns_zero() -> None:
    assert score_metric(-1, PE_RANGES) == 0
    assert score_metric(25, [ScoreRange(0, 10, 5)]) == 0


def test_pe_table_buckets() -> None:
    assert [score_metric(value, PE_RANGES) for value in (5, 20, 30, 40, 80)] == [15, 12, 8, 4, 0]


@pytest.mark.parametrize(
    ("ranges", "value", "points"),
    [
        (PE_RANGES, 0, 15),
        (PE_RANGES, 15, 12),
        (PE_RANGES, 25, 8),
        (PE_RANGES, 35, 4),
        (PE_RANGES, 50, 0),
        (PS_RANGES, 2, 10),
        (VOLUME_RANGES, 500_000, 3),
        (VOLUME_RANGES, 5_000_000, 10),
        (VOLUME_RANGES, 20_000_000, 15),
        (TREND_STRENGTH_RANGES, 30, 2.5),
        (TREND_STRENGTH_RANGES, 55, 7.5),
        (TREND_STRENGTH_RANGES, 70, 10),
        (TREND_STRENGTH_RANGES, 100, 10),
        (VOLATILITY_RANGES, 0.15, 4),
        (VOLATILITY_RANGES, 0.5, 0),
    ],
)
def test_table_boundaries_open_the_next_bucket(ranges: tuple[ScoreRange, ...], value: float, points: float) -> None:
    assert score_metric(value, ranges) == points


def test_debt_to_equity_table_rewards_low_leverage() -> None:
    assert score_metric(0.1, DEBT_TO_EQUITY_RANGES) == 13
    assert score_metric(0.5, DEBT_TO_EQUITY_RANGES) == 12
    assert score_metric(3.0, DEBT_TO_EQUITY_RANGES) == 0
