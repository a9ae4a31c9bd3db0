"""Service layer entry points."""

from .tracker_service import (
    build_events_source,
    build_provider,
    get_events,
    get_series,
    load_chart,
    prepare_payload,
)

__all__ = ["build_events_source", "build_provider", "get_events", "get_series", "load_chart", "prepare_payload"]
