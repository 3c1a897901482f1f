"""Technical indicator calculations over an ascending price series."""

from __future__ import annotations

import math

from equity_scorer.schemas.models import HistoricalDataPoint
from equity_scorer.scoring.normalizer import TREND_STRENGTH_RANGES, VOLATILITY_RANGES, score_metric

TRADING_DAYS_PER_YEAR = 252


def _prices(series: list[HistoricalDataPoint]) -> list[float]:
    return [point.price for point in series]


def ols_slope(values: list[float]) -> float | None:
    """Least-squares slope of `values` against their index."""

    n = len(values)
    if n < 2:
        return None
    sum_x = sum_y = sum_xy = sum_xx = 0.0
    for x, y in enumerate(values):
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x
    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return None
    return (n * sum_xy - sum_x * sum_y) / denominator


def total_return(values: list[float]) -> float | None:
    """Percentage change from first to last value."""

    if len(values) < 2 or values[0] == 0:
        return None
    return (values[-1] - values[0]) / values[0] * 100


def trend_strength(values: list[float]) -> float | None:
    """Blend slope direction with return magnitude into a 0-100 indicator (50 is flat)."""

    if any(value <= 0 for value in values):
        return None
    slope = ols_slope(values)
    change = total_return(values)
    if slope is None or change is None:
        return None
    direction = math.copysign(1.0, slope) if slope != 0 else 0.0
    strength = (direction * abs(change) + 100) / 2
    if not math.isfinite(strength):
        return None
    return min(100.0, max(0.0, strength))


def trend_score(series: list[HistoricalDataPoint]) -> float:
    """Score price trend between 0 and 10."""

    strength = trend_strength(_prices(series))
    if strength is None:
        return 0.0
    return score_metric(strength, TREND_STRENGTH_RANGES)


def annualized_volatility(values: list[float]) -> float | None:
    """Root-mean-square daily return scaled to a trading year."""

    if len(values) < 2:
        return None
    squared: list[float] = []
    for idx in range(1, len(values)):
        previous = values[idx - 1]
        if previous <= 0:
            return None
        daily = (values[idx] - previous) / previous
        squared.append(daily * daily)
    return math.sqrt(sum(squared) / len(squared)) * math.sqrt(TRADING_DAYS_PER_YEAR)


def atr_ratio(values: list[float]) -> float | None:
    """Mean absolute day-over-day move relative to the last price."""

    if len(values) < 2 or values[-1] <= 0:
        return None
    moves = [abs(values[idx] - values[idx - 1]) for idx in range(1, len(values))]
    return (sum(moves) / len(moves)) / values[-1]


def volatility_score(series: list[HistoricalDataPoint]) -> float:
    """Score price stability between 0 and 5; calmer series score higher."""

    values = _prices(series)
    annualized = annualized_volatility(values)
    atr = atr_ratio(values)
    if annualized is None or atr is None:
        return 0.0
    blended = 0.7 * annualized + 0.3 * atr
    if not math.isfinite(blended):
        return 0.0
    return score_metric(blended, VOLATILITY_RANGES)
