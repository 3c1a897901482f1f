"""Table-driven mapping of raw metric values to bounded points."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple


class ScoreRange(NamedTuple):
    """Range `[minimum, maximum)` worth `points`.

    `closed=True` includes `maximum` as well; an infinite `maximum` is unbounded.
    """

    minimum: float
    maximum: float
    points: float
    closed: bool = False


def _contains(score_range: ScoreRange, value: float) -> bool:
    if value < score_range.minimum:
        return False
    if math.isinf(score_range.maximum):
        return True
    if score_range.closed:
        return value <= score_range.maximum
    return value < score_range.maximum


def score_metric(value: float, ranges: Sequence[ScoreRange]) -> float:
    """Return the points of the first range containing `value`, or 0 when none does.

    Ranges are scanned in the given order; tables below never overlap.
    """

    for score_range in ranges:
        if _contains(score_range, value):
            return score_range.points
    return 0.0


PE_RANGES: tuple[ScoreRange, ...] = (
    ScoreRange(0, 15, 15),
    ScoreRange(15, 25, 12),
    ScoreRange(25, 35, 8),
    ScoreRange(35, 50, 4),
    ScoreRange(50, math.inf, 0),
)

PS_RANGES: tuple[ScoreRange, ...] = (
    ScoreRange(0, 2, 15),
    ScoreRange(2, 4, 10),
    ScoreRange(4, 6, 6),
    ScoreRange(6, 10, 3),
    ScoreRange(10, math.inf, 0),
)

CURRENT_RATIO_RANGES: tuple[ScoreRange, ...] = (
    ScoreRange(0, 0.5, 0),
    ScoreRange(0.5, 1.0, 3),
    ScoreRange(1.0, 1.2, 6),
    ScoreRange(1.2, 1.5, 9),
    ScoreRange(1.5, math.inf, 12),
)

DEBT_TO_EQUITY_RANGES: tuple[ScoreRange, ...] = (
    ScoreRange(0, 0.25, 13),
    ScoreRange(0.25, 0.75, 12),
    ScoreRange(0.75, 1.0, 8),
    ScoreRange(1.0, 2.0, 4),
    ScoreRange(2.0, math.inf, 0),
)

VOLUME_RANGES: tuple[ScoreRange, ...] = (
    ScoreRange(0, 500_000, 0),
    ScoreRange(500_000, 1_000_000, 3),
    ScoreRange(1_000_000, 5_000_000, 6),
    ScoreRange(5_000_000, 20_000_000, 10),
    ScoreRange(20_000_000, math.inf, 15),
)

# Domain is [0, 100]; callers clamp before the lookup.
TREND_STRENGTH_RANGES: tuple[ScoreRange, ...] = (
    ScoreRange(0, 30, 0),
    ScoreRange(30, 45, 2.5),
    ScoreRange(45, 55, 5),
    ScoreRange(55, 70, 7.5),
    ScoreRange(70, 100, 10, closed=True),
)

# Lower volatility scores higher.
VOLATILITY_RANGES: tuple[ScoreRange, ...] = (
    ScoreRange(0, 0.15, 5),
    ScoreRange(0.15, 0.25, 4),
    ScoreRange(0.25, 0.35, 3),
    ScoreRange(0.35, 0.5, 1),
    ScoreRange(0.5, math.inf, 0),
)
