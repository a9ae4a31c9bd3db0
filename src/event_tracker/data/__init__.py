"""Data access layer."""

from .chart_api_provider import ChartApiPricesProvider
from .events import JsonEventsSource, filter_events
from .providers import EventsSource, PricesProvider
from .yfinance_provider import YFinancePricesProvider

__all__ = [
    "ChartApiPricesProvider",
    "EventsSource",
    "JsonEventsSource",
    "PricesProvider",
    "YFinancePricesProvider",
    "filter_events",
]
