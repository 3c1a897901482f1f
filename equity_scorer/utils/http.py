"""Async HTTP client with retry and timeout support."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity import AsyncRetrying, RetryError, stop_after_attempt, wait_exponential

from equity_scorer.config.settings import RetryConfig

LOGGER = logging.getLogger(__name__)


class HttpClient:
    """Thin wrapper around httpx with retries."""

    def __init__(
        self,
        timeout_seconds: float,
        retry_config: RetryConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._retry_config = retry_config
        self._client = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    async def get_json(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any] | list[Any]:
        """Return JSON payload or raise runtime error."""

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._retry_config.attempts),
                wait=wait_exponential(
                    min=self._retry_config.min_seconds,
                    max=self._retry_config.max_seconds,
                ),
                reraise=True,
            ):
                with attempt:
                    if attempt.retry_state.attempt_number > 1:
                        LOGGER.debug("Retrying request", extra={"url": url, "attempt": attempt.retry_state.attempt_number})
                    response = await self._client.get(url, params=params)
                    response.raise_for_status()
                    return response.json()
        except RetryError as error:
            raise RuntimeError(f"HTTP retries exhausted for URL: {url}") from error
        except httpx.HTTPError as error:
            raise RuntimeError(f"HTTP request failed for URL: {url}") from error

    async def close(self) -> None:
        """Close underlying transport."""

        await self._client.aclose()
