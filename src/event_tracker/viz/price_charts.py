"""Plotly figure builders for the event-annotated price chart."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from ..domain import ChartPayload

WINDOW_FILL = "rgba(255, 206, 86, 0.15)"
WINDOW_LABEL_COLOR = "#6b7280"
LINE_COLOR = "#2563eb"

SERIES_LABELS = {"close": "Close", "adj_close": "Adj Close"}


def make_event_chart(payload: ChartPayload, title: Optional[str] = None) -> go.Figure:
    """Build a single-ticker line chart with one shaded rectangle per window."""
    fig = go.Figure()
    title = title or f"{payload.ticker} {SERIES_LABELS.get(payload.series_field, 'Close')}"

    if payload.empty:
        fig.add_annotation(text="No data to display", showarrow=False, x=0.5, y=0.5, xref="paper", yref="paper")
        fig.update_layout(title=title, template="plotly_white")
        return fig

    fig.add_trace(
        go.Scatter(
            x=pd.to_datetime(payload.dates, format="%Y-%m-%d"),
            y=payload.values,
            mode="lines",
            name=SERIES_LABELS.get(payload.series_field, "Close"),
            line=dict(color=LINE_COLOR, width=2),
        )
    )

    for window in payload.windows:
        fig.add_vrect(
            x0=window.start_date,
            x1=window.end_date,
            fillcolor=WINDOW_FILL,
            line_width=0,
            layer="below",
            name=window.key,
            annotation_text=window.label,
            annotation_position="top left",
            annotation_font_color=WINDOW_LABEL_COLOR,
        )

    fig.update_layout(
        title=title,
        xaxis_title="Date",
        yaxis_title="Price",
        hovermode="x unified",
        template="plotly_white",
        showlegend=False,
    )

    return fig


@dataclass
class ChartSession:
    """Owned chart handle; replaced wholesale on every successful load."""

    figure: Optional[go.Figure] = None
    payload: Optional[ChartPayload] = None
    renders: int = 0

    @property
    def has_chart(self) -> bool:
        return self.figure is not None


def render_chart(session: Optional[ChartSession], payload: ChartPayload, title: Optional[str] = None) -> ChartSession:
    """Tear down the session's figure and return a new session for ``payload``."""
    renders = session.renders if session is not None else 0
    return ChartSession(figure=make_event_chart(payload, title=title), payload=payload, renders=renders + 1)
