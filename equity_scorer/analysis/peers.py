"""Peer-group benchmarking."""

from __future__ import annotations

from statistics import mean

from equity_scorer.schemas.models import PeerAverages, PeerMetric, StockMetrics

PE_BONUS = 5.0
PS_BONUS = 5.0
CURRENT_RATIO_BONUS = 3.0
DEBT_TO_EQUITY_BONUS = 2.0


def peer_averages(peers: list[PeerMetric]) -> PeerAverages | None:
    """Average the comparable ratios of a peer set, or None when it is empty."""

    if not peers:
        return None
    return PeerAverages(
        pe=mean(peer.pe for peer in peers),
        ps=mean(peer.ps for peer in peers),
        current_ratio=mean(peer.current_ratio for peer in peers),
        debt_to_equity=mean(peer.debt_to_equity for peer in peers),
    )


def peer_comparison_score(metrics: StockMetrics, peers: list[PeerMetric]) -> float:
    """Award bonus points where the subject beats the peer average (max 15)."""

    averages = peer_averages(peers)
    if averages is None:
        return 0.0

    score = 0.0
    if 0 < metrics.pe < averages.pe:
        score += PE_BONUS
    if metrics.ps < averages.ps:
        score += PS_BONUS
    if metrics.current_ratio > averages.current_ratio:
        score += CURRENT_RATIO_BONUS
    if metrics.debt_to_equity < averages.debt_to_equity:
        score += DEBT_TO_EQUITY_BONUS
    return score
