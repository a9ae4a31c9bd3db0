"""Map point-in-time events onto shaded index ranges of a cleaned date axis."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..domain import DEFAULT_EVENT_LABEL, AnnotationWindow, Event

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 3


def window_key(event: Event, ordinal: int) -> str:
    """Render-scoped key; ``ordinal`` makes repeated events on one date distinct."""
    return f"ev_{event.ticker.upper()}_{event.date}_{ordinal}"


def build_windows(dates: Sequence[str], events: Iterable[Event], radius: int = DEFAULT_RADIUS) -> list[AnnotationWindow]:
    """Build one window per event whose date is on the axis.

    Events whose date is missing from ``dates`` (weekends, holidays, outside
    the fetched range) are skipped without error. The window covers
    ``radius`` positions either side of the event, clamped to the axis.
    Overlapping windows are kept separate and returned in event order.
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    if not len(dates):
        return []

    to_index = {date: idx for idx, date in enumerate(dates)}
    last = len(dates) - 1

    windows = []
    for event in events:
        idx = to_index.get(event.date)
        if idx is None:
            logger.debug("No trading day %s for %s event %r; skipped", event.date, event.ticker, event.label)
            continue

        start_idx = max(0, idx - radius)
        end_idx = min(last, idx + radius)
        windows.append(
            AnnotationWindow(
                key=window_key(event, len(windows)),
                start_date=dates[start_idx],
                end_date=dates[end_idx],
                label=event.label or DEFAULT_EVENT_LABEL,
                event_date=event.date,
                start_index=start_idx,
                end_index=end_idx,
            )
        )
    return windows
