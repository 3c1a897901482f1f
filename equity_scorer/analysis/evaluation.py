"""Qualitative labels for individual metrics."""

from __future__ import annotations

from equity_scorer.schemas.models import MetricEvaluation, MetricStatus


def _pe_status(value: float) -> MetricStatus:
    if value < 0:
        return "Negative"
    if value < 15:
        return "Undervalued"
    if value > 30:
        return "Overvalued"
    return "Fair Value"


def _ps_status(value: float) -> MetricStatus:
    if value < 2:
        return "Undervalued"
    if value > 5:
        return "Overvalued"
    return "Fair Value"


def _volume_status(value: float) -> MetricStatus:
    if value > 50_000_000:
        return "High Activity"
    if value > 20_000_000:
        return "Moderate Activity"
    if value > 5_000_000:
        return "Low Activity"
    return "Very Low Activity"


def evaluate_metric(metric: str, value: float) -> MetricEvaluation:
    """Label a metric value; metrics without a rule are Neutral."""

    if metric == "pe":
        status = _pe_status(value)
    elif metric == "ps":
        status = _ps_status(value)
    elif metric == "volume":
        status = _volume_status(value)
    else:
        status = "Neutral"
    return MetricEvaluation(metric=metric, value=value, status=status)
