"""Provider abstraction for peer-metrics sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from equity_scorer.schemas.models import PeerMetric


class ProviderError(RuntimeError):
    """Raised when a provider cannot produce peer data."""


class BasePeerProvider(ABC):
    """Abstract provider interface.

    Instances are awaitable callables, so they can be passed anywhere the engine
    expects a `(symbol) -> Awaitable[list[PeerMetric]]` function.
    """

    name: str

    @abstractmethod
    async def get_peer_metrics(self, symbol: str) -> list[PeerMetric]:
        """Fetch metrics for the sector peers of `symbol`, excluding `symbol` itself."""

    async def __call__(self, symbol: str) -> list[PeerMetric]:
        return await self.get_peer_metrics(symbol)
