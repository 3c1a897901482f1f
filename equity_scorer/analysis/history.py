"""Price-history helpers shared with charting callers."""

from __future__ import annotations

from equity_scorer.schemas.models import HistoricalDataPoint, TimeRange

RANGE_POINTS: dict[str, int | None] = {
    "1W": 7,
    "1M": 30,
    "3M": 90,
    "1Y": None,
}


def filter_by_range(series: list[HistoricalDataPoint], time_range: TimeRange) -> list[HistoricalDataPoint]:
    """Return the trailing slice of `series` for a chart range. No resampling."""

    if time_range not in RANGE_POINTS:
        raise ValueError(f"Unsupported time range: {time_range}")
    count = RANGE_POINTS[time_range]
    if count is None:
        return list(series)
    return list(series[-count:])


def percentage_change(series: list[HistoricalDataPoint]) -> float:
    """Percent move from the first to the last point; 0 when undefined."""

    if len(series) < 2:
        return 0.0
    first = series[0].price
    if first == 0:
        return 0.0
    return (series[-1].price - first) / first * 100
