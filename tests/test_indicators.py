"""Tests for trend and volatility indicators."""

from __future__ import annotations

import math
from datetime import date, timedelta

import pytest

from equity_scorer.indicators.technical import (
    annualized_volatility,
    atr_ratio,
    ols_slope,
    total_return,
    trend_score,
    trend_strength,
    volatility_score,
)
from equity_scorer.schemas.models import HistoricalDataPoint


def _series(prices: list[float]) -> list[HistoricalDataPoint]:
    start = date(2024, 1, 1)
    return [HistoricalDataPoint(date=start + timedelta(days=idx), price=price) for idx, price in enumerate(prices)]


def _linear(start: float, end: float, count: int) -> list[float]:
    step = (end - start) / (count - 1)
    return [start + step * idx for idx in range(count)]


def test_ols_slope_of_straight_line() -> None:
    assert ols_slope([1.0, 2.0, 3.0, 4.0]) == pytest.approx(1.0)
    assert ols_slope([5.0, 5.0, 5.0]) == 0
    assert ols_slope([42.0]) is None


def test_total_return_guards_zero_start() -> None:
    assert total_return([100.0, 110.0]) == pytest.approx(10.0)
    assert total_return([0.0, 10.0]) is None


def test_flat_series_is_neutral_trend() -> None:
    series = _series([100.0] * 30)
    assert trend_strength([100.0] * 30) == pytest.approx(50.0)
    assert trend_score(series) == 5


def test_uptrend_scores_at_least_reversed_series() -> None:
    prices = _linear(100, 130, 31)
    up = trend_score(_series(prices))
    down = trend_score(_series(list(reversed(prices))))
    assert up == 7.5
    assert down == 2.5
    assert up >= down


def test_large_moves_stay_in_end_buckets() -> None:
    assert trend_score(_series(_linear(100, 400, 20))) == 10
    assert trend_score(_series(_linear(100, 10, 20))) == 0


def test_trend_degrades_to_zero_for_short_or_zero_start_series() -> None:
    assert trend_score([]) == 0
    assert trend_score(_series([100.0])) == 0
    assert trend_score(_series([0.0, 5.0, 10.0])) == 0
    assert trend_score(_series([100.0, -5.0, 100.0])) == 0


def test_constant_series_has_maximum_volatility_score() -> None:
    assert volatility_score(_series([100.0] * 30)) == 5


def test_volatility_components() -> None:
    assert annualized_volatility([100.0, 101.0]) == pytest.approx(0.01 * math.sqrt(252))
    assert atr_ratio([100.0, 102.0, 101.0]) == pytest.approx(1.5 / 101.0)
    assert annualized_volatility([100.0]) is None
    assert atr_ratio([100.0, 0.0]) is None


def test_calm_series_beats_choppy_series() -> None:
    calm = volatility_score(_series([100.0, 100.1] * 15))
    choppy = volatility_score(_series([100.0, 150.0] * 15))
    assert calm == 5
    assert choppy == 0


def test_volatility_degrades_to_zero_on_bad_input() -> None:
    assert volatility_score(_series([100.0])) == 0
    assert volatility_score(_series([100.0, 0.0, 100.0])) == 0
