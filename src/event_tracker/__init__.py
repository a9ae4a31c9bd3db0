"""event_tracker package: price series alignment and event-window annotation."""

from .domain import AnnotationWindow, ChartPayload, ChartQuery, CleanedSeries, Event, PriceSeries, SeriesField

__all__ = [
    "AnnotationWindow",
    "ChartPayload",
    "ChartQuery",
    "CleanedSeries",
    "Event",
    "PriceSeries",
    "SeriesField",
]
