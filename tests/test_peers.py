"""Tests for peer benchmarking."""

from __future__ import annotations

import pytest

from equity_scorer.analysis.peers import peer_averages, peer_comparison_score
from equity_scorer.schemas.models import PeerMetric, StockMetrics


def _peers() -> list[PeerMetric]:
    return [
        PeerMetric(symbol="AAA", pe=15.0, ps=2.0, current_ratio=1.0, debt_to_equity=0.5),
        PeerMetric(symbol="BBB", pe=25.0, ps=4.0, current_ratio=2.0, debt_to_equity=1.5),
    ]


def test_peer_averages() -> None:
    averages = peer_averages(_peers())
    assert averages is not None
    assert averages.pe == pytest.approx(20.0)
    assert averages.ps == pytest.approx(3.0)
    assert averages.current_ratio == pytest.approx(1.5)
    assert averages.debt_to_equity == pytest.approx(1.0)


def test_empty_peer_set_scores_zero() -> None:
    assert peer_averages([]) is None
    assert peer_comparison_score(StockMetrics(pe=10.0), []) == 0


def test_all_comparisons_favorable() -> None:
    metrics = StockMetrics(pe=10.0, ps=1.0, current_ratio=2.0, debt_to_equity=0.5)
    assert peer_comparison_score(metrics, _peers()) == 15


def test_negative_pe_never_earns_pe_bonus() -> None:
    metrics = StockMetrics(pe=-5.0, ps=1.0, current_ratio=2.0, debt_to_equity=0.5)
    assert peer_comparison_score(metrics, _peers()) == 10


def test_unfavorable_subject_scores_zero() -> None:
    metrics = StockMetrics(pe=40.0, ps=8.0, current_ratio=0.5, debt_to_equity=3.0)
    assert peer_comparison_score(metrics, _peers()) == 0
