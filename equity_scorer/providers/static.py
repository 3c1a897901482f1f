"""In-memory peer provider."""

from __future__ import annotations

from collections.abc import Mapping

from equity_scorer.providers.base import BasePeerProvider
from equity_scorer.schemas.models import PeerMetric


class StaticPeerProvider(BasePeerProvider):
    """Serve peer sets from a preloaded mapping keyed by symbol."""

    name = "static"

    def __init__(self, peers_by_symbol: Mapping[str, list[PeerMetric]]) -> None:
        self._peers = {symbol.upper(): list(peers) for symbol, peers in peers_by_symbol.items()}

    async def get_peer_metrics(self, symbol: str) -> list[PeerMetric]:
        normalized = symbol.upper().strip()
        return [peer for peer in self._peers.get(normalized, []) if peer.symbol.upper() != normalized]
