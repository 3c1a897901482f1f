"""Recommendation tier derived from the composite total."""

from __future__ import annotations

from equity_scorer.config.settings import TierThresholds
from equity_scorer.schemas.models import Tier

TIER_LABELS: dict[Tier, str] = {
    "StrongBuy": "Strong Buy",
    "Buy": "Buy",
    "Hold": "Hold",
    "NotRecommended": "Not Recommended",
}


def classify_tier(total: float, thresholds: TierThresholds | None = None) -> Tier:
    """Map a 0-100 total to a tier, checking the highest band first."""

    thresholds = thresholds or TierThresholds()
    if total >= thresholds.strong_buy:
        return "StrongBuy"
    if total >= thresholds.buy:
        return "Buy"
    if total >= thresholds.hold:
        return "Hold"
    return "NotRecommended"


def tier_label(tier: Tier) -> str:
    """Human-readable label for a tier."""

    return TIER_LABELS[tier]
