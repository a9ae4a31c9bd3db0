"""Series cleaning, selection and event-window mapping."""

from .series import clean_series, has_finite, select_series
from .summary import build_events_table, build_summary
from .windows import DEFAULT_RADIUS, build_windows

__all__ = [
    "DEFAULT_RADIUS",
    "build_events_table",
    "build_summary",
    "build_windows",
    "clean_series",
    "has_finite",
    "select_series",
]
