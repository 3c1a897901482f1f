"""Wire settings, the FMP peer provider and the scoring engine together."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from equity_scorer.config.settings import Settings, get_settings
from equity_scorer.providers.fmp import FmpPeerProvider
from equity_scorer.schemas.models import CompositeScore, StockSnapshot
from equity_scorer.scoring.engine import compute_recommendation
from equity_scorer.utils.http import HttpClient
from equity_scorer.utils.logging import configure_logging

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def peer_provider_session(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[FmpPeerProvider]:
    """Yield an FMP provider whose HTTP client is closed on exit."""

    settings = settings or get_settings()
    if not settings.fmp_api_key:
        LOGGER.warning("FMP_API_KEY is not set; peer requests will likely be rejected")
    http_client = HttpClient(
        timeout_seconds=settings.request_timeout_seconds,
        retry_config=settings.retry,
        transport=transport,
    )
    try:
        yield FmpPeerProvider(
            settings.fmp_api_key,
            http_client,
            base_url=settings.fmp_base_url,
            peer_limit=settings.peer_limit,
        )
    finally:
        await http_client.close()


async def recommend(
    stock: StockSnapshot,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CompositeScore:
    """Score `stock` using FMP peers and the configured tier thresholds."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)
    async with peer_provider_session(settings, transport=transport) as provider:
        return await compute_recommendation(stock, provider, settings.tier_thresholds)
