"""Streamlit entrypoint for the stock events tracker."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path

# --- Ensure src is on path for local imports ---
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

import streamlit as st  # noqa: E402

from event_tracker import ChartPayload, ChartQuery, CleanedSeries  # noqa: E402
from event_tracker.analytics import build_events_table, build_summary  # noqa: E402
from event_tracker.config import TrackerConfig  # noqa: E402
from event_tracker.domain import INTERVALS, RANGES  # noqa: E402
from event_tracker.services import build_events_source, build_provider, load_chart  # noqa: E402
from event_tracker.utils import DataRetrievalError, get_logger  # noqa: E402
from event_tracker.viz import ChartSession, render_chart  # noqa: E402

logger = get_logger(__name__)


@dataclass
class UiInputs:
    ticker: str
    range: str
    interval: str
    radius: int


@st.cache_resource(show_spinner=False)
def load_config() -> TrackerConfig:
    return TrackerConfig.from_env()


def request_load() -> None:
    """Button callback; runs before the script so Load is drawn disabled."""
    st.session_state.loading = True
    st.session_state.pending_load = True


def render_sidebar(config: TrackerConfig) -> UiInputs:
    st.sidebar.header("Tracker Controls")

    with st.sidebar.expander("📂 Data Selection", expanded=True):
        ticker = st.text_input("Ticker", value=config.default_ticker, placeholder="e.g. AAPL").upper().strip()
        col1, col2 = st.columns(2)
        with col1:
            range_ = st.selectbox("Range", options=list(RANGES), index=RANGES.index(config.range))
        with col2:
            interval = st.selectbox("Interval", options=list(INTERVALS), index=INTERVALS.index(config.interval))

    with st.sidebar.expander("⚙️ View Settings", expanded=True):
        radius = st.slider(
            "Event window (± trading days)",
            min_value=0,
            max_value=10,
            value=config.window_radius,
            help="Points shaded either side of each event date",
        )

    st.sidebar.button(
        "Load",
        type="primary",
        on_click=request_load,
        disabled=st.session_state.loading,
        use_container_width=True,
    )

    return UiInputs(ticker=ticker, range=range_, interval=interval, radius=radius)


def run_load(config: TrackerConfig, inputs: UiInputs) -> None:
    """Fetch and render; on failure the previous session is left untouched."""
    st.session_state.load_error = None
    try:
        query = ChartQuery(ticker=inputs.ticker, range=inputs.range, interval=inputs.interval)
    except ValueError as err:
        st.session_state.load_error = str(err)
        return

    try:
        with st.spinner(f"Loading {query.ticker} ({query.range}, {query.interval})..."):
            payload = load_chart(build_provider(config), build_events_source(config), query, inputs.radius)
    except DataRetrievalError as err:
        logger.error("Load failed for %s: %s", query.ticker, err)
        st.session_state.load_error = f"Failed to load {query.ticker}: {err}"
        return

    st.session_state.chart_session = render_chart(st.session_state.get("chart_session"), payload)


def render_body(session: ChartSession) -> None:
    payload: ChartPayload = session.payload
    st.plotly_chart(session.figure, use_container_width=True)

    if payload.series_field == "adj_close":
        st.info("Close prices were unavailable; showing adjusted close.")

    tab_events, tab_summary, tab_download = st.tabs(["📌 Events", "📊 Summary", "📥 Downloads"])

    with tab_events:
        events_table = build_events_table(payload)
        if events_table.empty:
            st.info(f"No events listed for {payload.ticker}.")
        else:
            st.dataframe(events_table, hide_index=True, width="stretch")

    with tab_summary:
        summary = build_summary(payload)
        display_summary = summary.set_index("ticker")
        display_summary["total_return_pct"] = display_summary["total_return_pct"].map("{:.2f}%".format)
        st.dataframe(display_summary, width="stretch")

    with tab_download:
        cleaned = CleanedSeries(dates=tuple(payload.dates), values=tuple(payload.values))
        frame = cleaned.to_frame().rename(columns={"value": payload.series_field})
        st.download_button(
            "Download cleaned series CSV",
            data=frame.to_csv(index=False, date_format="%Y-%m-%d"),
            file_name=f"{payload.ticker}_{payload.series_field}_{date.today()}.csv",
            mime="text/csv",
            width="stretch",
        )


def main() -> None:
    st.set_page_config(page_title="Stock Events Tracker", layout="wide")
    st.title("Stock Events Tracker")
    st.caption("Streamlit + Plotly · shaded windows around each event date")

    try:
        config = load_config()
    except ValueError as err:
        st.error(f"Invalid configuration: {err}")
        return

    st.session_state.setdefault("loading", False)
    st.session_state.setdefault("pending_load", False)
    if not st.session_state.get("auto_loaded", False):
        st.session_state.auto_loaded = True
        request_load()

    inputs = render_sidebar(config)

    # One load per run, with Load drawn disabled; rerun once it is done to re-enable it.
    if st.session_state.pending_load:
        try:
            run_load(config, inputs)
        finally:
            st.session_state.pending_load = False
            st.session_state.loading = False
        st.rerun()

    if st.session_state.get("load_error"):
        st.error(st.session_state.load_error)

    session: ChartSession | None = st.session_state.get("chart_session")
    if session is None or not session.has_chart:
        st.info("Pick a ticker and press Load to draw its chart.")
        return

    render_body(session)


if __name__ == "__main__":
    main()
