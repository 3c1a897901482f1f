"""Deterministic stock scoring engine."""

from __future__ import annotations

import logging
import math
from collections.abc import Awaitable, Callable

from equity_scorer.analysis.peers import peer_comparison_score
from equity_scorer.analysis.signal_engine import classify_tier
from equity_scorer.config.settings import TierThresholds
from equity_scorer.indicators.technical import trend_score, volatility_score
from equity_scorer.schemas.models import (
    CompositeScore,
    HistoricalDataPoint,
    PeerMetric,
    ScoreBreakdown,
    StockMetrics,
    StockSnapshot,
)
from equity_scorer.scoring.normalizer import (
    CURRENT_RATIO_RANGES,
    DEBT_TO_EQUITY_RANGES,
    PE_RANGES,
    PS_RANGES,
    VOLUME_RANGES,
    score_metric,
)

LOGGER = logging.getLogger(__name__)

PeerProvider = Callable[[str], Awaitable[list[PeerMetric]]]

VALUATION_CEILING = 30.0
HEALTH_CEILING = 25.0
VOLUME_CEILING = 15.0
PEER_CEILING = 15.0
TECHNICAL_CEILING = 15.0
NEGATIVE_PE_POINTS = 3.0


def _clamp(value: float, high: float, low: float = 0.0) -> float:
    if not math.isfinite(value):
        return low
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_valuation(metrics: StockMetrics) -> float:
    """Cheaper multiples score higher; loss-makers get a fixed low P/E contribution."""

    if metrics.pe < 0:
        pe_points = NEGATIVE_PE_POINTS
    else:
        pe_points = score_metric(metrics.pe, PE_RANGES)
    ps_points = score_metric(metrics.ps, PS_RANGES)
    return _clamp(pe_points + ps_points, VALUATION_CEILING)


def score_health(metrics: StockMetrics) -> float:
    """Liquidity and leverage."""

    current = score_metric(metrics.current_ratio, CURRENT_RATIO_RANGES)
    leverage = score_metric(metrics.debt_to_equity, DEBT_TO_EQUITY_RANGES)
    return _clamp(current + leverage, HEALTH_CEILING)


def score_volume(metrics: StockMetrics) -> float:
    return _clamp(score_metric(metrics.volume, VOLUME_RANGES), VOLUME_CEILING)


def score_technical(series: list[HistoricalDataPoint]) -> float:
    """Trend plus volatility, capped even though the sub-score maxima already sum to the cap."""

    return _clamp(trend_score(series) + volatility_score(series), TECHNICAL_CEILING)


def build_composite_score(
    stock: StockSnapshot,
    peers: list[PeerMetric],
    thresholds: TierThresholds | None = None,
) -> CompositeScore:
    """Score a stock against an already resolved peer set."""

    metrics = stock.metrics
    if len(stock.historical_data) < 2:
        LOGGER.info("Insufficient price history", extra={"symbol": stock.symbol, "points": len(stock.historical_data)})
    if not peers:
        LOGGER.info("No peer data", extra={"symbol": stock.symbol})

    breakdown = ScoreBreakdown(
        valuation=score_valuation(metrics),
        health=score_health(metrics),
        volume=score_volume(metrics),
        peer_comparison=_clamp(peer_comparison_score(metrics, peers), PEER_CEILING),
        technical=score_technical(stock.historical_data),
    )
    total = _round_half_up(_clamp(breakdown.total(), 100.0))
    return CompositeScore(
        symbol=stock.symbol,
        total=total,
        breakdown=breakdown,
        tier=classify_tier(total, thresholds),
        negative_earnings=metrics.pe < 0,
    )


async def compute_recommendation(
    stock: StockSnapshot,
    peer_provider: PeerProvider,
    thresholds: TierThresholds | None = None,
) -> CompositeScore:
    """Fetch peers once through the injected provider and score the stock.

    Provider failures propagate unchanged; the engine neither retries nor
    substitutes peer data.
    """

    peers = await peer_provider(stock.symbol)
    result = build_composite_score(stock, peers, thresholds)
    LOGGER.debug(
        "Computed recommendation",
        extra={"symbol": result.symbol, "total": result.total, "tier": result.tier},
    )
    return result
