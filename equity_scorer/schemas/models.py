"""Typed records exchanged between callers, providers and the scoring engine."""

from __future__ import annotations

from datetime import date as Date
from typing import Literal

from pydantic import BaseModel, Field

Tier = Literal["StrongBuy", "Buy", "Hold", "NotRecommended"]
TimeRange = Literal["1W", "1M", "3M", "1Y"]
MetricStatus = Literal[
    "Negative",
    "Undervalued",
    "Fair Value",
    "Overvalued",
    "High Activity",
    "Moderate Activity",
    "Low Activity",
    "Very Low Activity",
    "Neutral",
]


class StockMetrics(BaseModel):
    """Fundamental ratios for one symbol. Missing values are coerced to 0 upstream."""

    pe: float = 0.0
    ps: float = 0.0
    volume: float = 0.0
    market_cap: float = 0.0
    price_to_book: float = 0.0
    debt_to_equity: float = 0.0
    current_ratio: float = 0.0


class HistoricalDataPoint(BaseModel):
    """Single closing price.

    Non-positive prices are accepted; indicators score such series as 0.
    """

    date: Date
    price: float


PriceSeries = list[HistoricalDataPoint]


class StockSnapshot(BaseModel):
    """Everything the engine needs to score one symbol."""

    symbol: str
    metrics: StockMetrics = Field(default_factory=StockMetrics)
    historical_data: PriceSeries = Field(default_factory=list)


class PeerMetric(BaseModel):
    """Metrics of one sector peer."""

    symbol: str
    pe: float = 0.0
    ps: float = 0.0
    volume: float = 0.0
    current_ratio: float = 0.0
    debt_to_equity: float = 0.0


class PeerAverages(BaseModel):
    """Arithmetic means across a peer set."""

    pe: float
    ps: float
    current_ratio: float
    debt_to_equity: float


class ScoreBreakdown(BaseModel):
    """Per-category points, each bounded by its own ceiling."""

    valuation: float = Field(default=0.0, ge=0, le=30)
    health: float = Field(default=0.0, ge=0, le=25)
    volume: float = Field(default=0.0, ge=0, le=15)
    peer_comparison: float = Field(default=0.0, ge=0, le=15)
    technical: float = Field(default=0.0, ge=0, le=15)

    def total(self) -> float:
        return self.valuation + self.health + self.volume + self.peer_comparison + self.technical


class CompositeScore(BaseModel):
    """Scored result for one invocation, tagged with the requested symbol."""

    symbol: str
    total: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdown
    tier: Tier
    negative_earnings: bool = False


class MetricEvaluation(BaseModel):
    """Qualitative reading of a single metric."""

    metric: str
    value: float
    status: MetricStatus
