"""Summary helpers for a cleaned price series."""

from __future__ import annotations

import pandas as pd

from ..domain import ChartPayload

SUMMARY_COLUMNS = ["ticker", "series", "points", "start_date", "end_date", "start_price", "last_price", "total_return_pct"]


def build_summary(payload: ChartPayload) -> pd.DataFrame:
    """One-row frame with first/last points and total return for the chart."""
    if payload.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    start_price = payload.values[0]
    last_price = payload.values[-1]
    total_return = (last_price / start_price - 1) * 100 if start_price else float("nan")

    summary = pd.DataFrame(
        {
            "ticker": [payload.ticker],
            "series": [payload.series_field],
            "points": [len(payload.dates)],
            "start_date": [payload.dates[0]],
            "end_date": [payload.dates[-1]],
            "start_price": [start_price],
            "last_price": [last_price],
            "total_return_pct": [total_return],
        }
    )
    return summary[SUMMARY_COLUMNS]


def build_events_table(payload: ChartPayload) -> pd.DataFrame:
    """List every loaded event with the window it produced, if any."""
    columns = ["date", "label", "status", "window_start", "window_end"]
    if not payload.events:
        return pd.DataFrame(columns=columns)

    windows_by_date: dict[str, list] = {}
    for window in payload.windows:
        windows_by_date.setdefault(window.event_date, []).append(window)

    rows = []
    for event in payload.events:
        matches = windows_by_date.get(event.date) or []
        window = matches.pop(0) if matches else None
        rows.append(
            {
                "date": event.date,
                "label": event.label,
                "status": "shaded" if window else "skipped (no trading day)",
                "window_start": window.start_date if window else None,
                "window_end": window.end_date if window else None,
            }
        )
    return pd.DataFrame(rows, columns=columns)
