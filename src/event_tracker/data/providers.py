"""Provider protocols for prices and events."""

from __future__ import annotations

from typing import Protocol

from ..domain import ChartQuery, Event, PriceSeries


class PricesProvider(Protocol):
    """Abstraction for price data sources."""

    def fetch_series(self, query: ChartQuery) -> PriceSeries:
        """Fetch raw close/adjusted-close series for one ticker."""
        raise NotImplementedError


class EventsSource(Protocol):
    """Abstraction for the static events list."""

    def load(self, ticker: str) -> list[Event]:
        """Return events for ``ticker``; raise EventsSourceError when unavailable."""
        raise NotImplementedError
