"""Financial Modeling Prep peer provider."""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any

from equity_scorer.providers.base import BasePeerProvider, ProviderError
from equity_scorer.schemas.models import PeerMetric
from equity_scorer.utils.http import HttpClient

LOGGER = logging.getLogger(__name__)


class FmpPeerProvider(BasePeerProvider):
    """Resolve sector peers and their TTM ratios from FMP."""

    name = "fmp"

    def __init__(
        self,
        api_key: str,
        http_client: HttpClient,
        base_url: str = "https://financialmodelingprep.com/api",
        peer_limit: int = 10,
    ) -> None:
        self._api_key = api_key
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")
        self._peer_limit = peer_limit

    async def get_peer_metrics(self, symbol: str) -> list[PeerMetric]:
        normalized = symbol.upper().strip()
        try:
            peer_symbols = await self._peer_symbols(normalized)
            results = await asyncio.gather(*(self._peer_metric(peer) for peer in peer_symbols))
        except RuntimeError as error:
            raise ProviderError(f"{self.name} peer lookup failed for {normalized}") from error
        peers = [peer for peer in results if peer is not None]
        LOGGER.info(
            "Resolved peer metrics",
            extra={"provider": self.name, "symbol": normalized, "requested": len(peer_symbols), "resolved": len(peers)},
        )
        return peers

    async def _get(self, path: str, **params: str) -> dict[str, Any] | list[Any]:
        return await self._http_client.get_json(
            f"{self._base_url}/{path}",
            params={**params, "apikey": self._api_key},
        )

    async def _peer_symbols(self, symbol: str) -> list[str]:
        payload = await self._get("v4/stock_peers", symbol=symbol)
        entry = _first(payload)
        raw = entry.get("peersList") if entry else None
        if not isinstance(raw, list):
            return []
        peers: list[str] = []
        for item in raw:
            if not isinstance(item, str):
                continue
            peer = item.upper().strip()
            if peer and peer != symbol and peer not in peers:
                peers.append(peer)
        return peers[: self._peer_limit]

    async def _peer_metric(self, symbol: str) -> PeerMetric | None:
        quote_payload, metrics_payload = await asyncio.gather(
            self._get(f"v3/quote/{symbol}"),
            self._get(f"v3/key-metrics-ttm/{symbol}"),
        )
        quote = _first(quote_payload)
        if not quote:
            return None
        metrics = _first(metrics_payload) or {}
        return PeerMetric(
            symbol=symbol,
            pe=_as_float(quote.get("pe")),
            ps=_as_float(metrics.get("priceToSalesRatioTTM")),
            volume=_as_float(quote.get("volume")),
            current_ratio=_as_float(metrics.get("currentRatioTTM")),
            debt_to_equity=_as_float(metrics.get("debtToEquityTTM")),
        )


def _first(payload: dict[str, Any] | list[Any]) -> dict[str, Any] | None:
    if isinstance(payload, list):
        payload = payload[0] if payload else None
    return payload if isinstance(payload, dict) and payload else None


def _as_float(value: Any) -> float:
    """Convert value to float, treating missing or malformed values as 0."""

    if value in (None, "", "None", "null"):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0
