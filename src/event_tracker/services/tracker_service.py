"""Load one render cycle: fetch prices and events, clean, annotate."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from ..analytics import DEFAULT_RADIUS, build_windows, clean_series, select_series
from ..config import TrackerConfig
from ..data import ChartApiPricesProvider, EventsSource, JsonEventsSource, PricesProvider, YFinancePricesProvider
from ..domain import ChartPayload, ChartQuery, Event, PriceSeries
from ..utils import DataRetrievalError, EventsSourceError, MalformedPayloadError, NoDataError

logger = logging.getLogger(__name__)


def build_provider(config: TrackerConfig) -> PricesProvider:
    if config.provider == "yfinance":
        return YFinancePricesProvider()
    return ChartApiPricesProvider(config.proxy_url, chart_host=config.chart_host, timeout=config.http_timeout)


def build_events_source(config: TrackerConfig) -> EventsSource:
    return JsonEventsSource(config.events_source, timeout=config.http_timeout)


def get_series(provider: PricesProvider, query: ChartQuery) -> PriceSeries:
    """Fetch raw series, wrapping unexpected provider failures."""
    try:
        return provider.fetch_series(query)
    except Exception as err:
        if isinstance(err, DataRetrievalError):
            raise
        raise DataRetrievalError(f"Failed to fetch prices: {err}") from err


def get_events(source: EventsSource, ticker: str) -> list[Event]:
    """Events never fail a render: any problem yields an empty list."""
    try:
        return source.load(ticker)
    except EventsSourceError as err:
        logger.warning("Events source unavailable, proceeding without events: %s", err)
    except Exception:
        logger.exception("Unexpected error loading events for %s; proceeding without events", ticker)
    return []


def prepare_payload(raw: PriceSeries, events: list[Event], radius: int = DEFAULT_RADIUS) -> ChartPayload:
    """Select close/adj close, drop invalid points and attach event windows."""
    chosen = select_series(raw.close, raw.adj_close)
    series_field = "close" if chosen is raw.close else "adj_close"
    if series_field == "adj_close":
        logger.warning("%s close series has no finite values; using adjusted close", raw.ticker)

    if len(chosen) != len(raw.dates):
        raise MalformedPayloadError(f"Malformed data: dates/{series_field} length mismatch")

    cleaned = clean_series(raw.dates, chosen)
    if cleaned.empty:
        logger.warning("Raw points: %d, clean finite points: 0", len(raw.dates))
        raise NoDataError("No valid numeric prices to plot (all values were null/NaN).")

    logger.info(
        "Fetched %d points for %s. First: %s %s Last: %s %s",
        len(cleaned),
        raw.ticker,
        cleaned.dates[0],
        cleaned.values[0],
        cleaned.dates[-1],
        cleaned.values[-1],
    )

    windows = build_windows(cleaned.dates, events, radius)
    if len(windows) < len(events):
        logger.info("%d of %d event(s) had no matching trading day", len(events) - len(windows), len(events))

    return ChartPayload(
        ticker=raw.ticker,
        dates=list(cleaned.dates),
        values=list(cleaned.values),
        windows=windows,
        series_field=series_field,
        events=list(events),
    )


def load_chart(
    provider: PricesProvider,
    events_source: EventsSource,
    query: ChartQuery,
    radius: int = DEFAULT_RADIUS,
) -> ChartPayload:
    """Fetch prices and events concurrently, then build the chart payload.

    Price failures propagate as DataRetrievalError; event failures degrade
    to no windows.
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="tracker-load") as executor:
        series_future = executor.submit(get_series, provider, query)
        events_future = executor.submit(get_events, events_source, query.ticker)
        events = events_future.result()
        raw = series_future.result()

    return prepare_payload(raw, events, radius)

