"""Normalize upstream chart payloads and yfinance frames into PriceSeries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime, tzinfo
from typing import Any, Optional

import pandas as pd

from ..domain import PriceSeries
from ..utils import MalformedPayloadError

RAW_FIELD_NAMES = {"Close", "Adj Close", "Volume", "Open", "High", "Low"}


def to_ymd(ts_seconds: float, tz: Optional[tzinfo] = None) -> str:
    """Format UNIX seconds as YYYY-MM-DD, in local time unless ``tz`` is given."""
    return datetime.fromtimestamp(ts_seconds, tz).strftime("%Y-%m-%d")


def empty_series(ticker: str) -> PriceSeries:
    return PriceSeries(ticker=ticker.upper(), dates=[], close=[], adj_close=[])


def parse_chart_payload(payload: Any, ticker: str, tz: Optional[tzinfo] = None) -> PriceSeries:
    """Extract timestamps, close and adjusted close from a v8 chart response.

    Raises MalformedPayloadError when ``chart.result[0]`` is missing; the
    message is the upstream ``chart.error.description`` when there is one.
    """
    chart = payload.get("chart") if isinstance(payload, Mapping) else None
    chart = chart if isinstance(chart, Mapping) else {}

    results = chart.get("result")
    result = results[0] if isinstance(results, Sequence) and results else None
    if not isinstance(result, Mapping):
        error = chart.get("error")
        description = error.get("description") if isinstance(error, Mapping) else None
        raise MalformedPayloadError(description or "No chart result")

    timestamps = result.get("timestamp") or []
    indicators = result.get("indicators") or {}
    close = _first_block(indicators.get("quote")).get("close") or []
    adj_close = _first_block(indicators.get("adjclose")).get("adjclose") or []

    return PriceSeries(
        ticker=ticker.upper(),
        dates=[to_ymd(ts, tz) for ts in timestamps],
        close=list(close),
        adj_close=list(adj_close),
    )


def _first_block(blocks: Any) -> Mapping[str, Any]:
    if isinstance(blocks, Sequence) and blocks and isinstance(blocks[0], Mapping):
        return blocks[0]
    return {}


def series_from_yfinance_frame(raw: pd.DataFrame, ticker: str) -> PriceSeries:
    """Convert a yfinance download for one ticker into a PriceSeries."""
    if raw is None or raw.empty:
        return empty_series(ticker)

    df = _ensure_tickers_first(raw)
    if isinstance(df.columns, pd.MultiIndex):
        level0 = df.columns.get_level_values(0)
        key = ticker if ticker in level0 else level0[0]
        df = df[key]

    rename_map = {
        "Close": "close",
        "Adj Close": "adj_close",
        "AdjClose": "adj_close",
        "Adj_Close": "adj_close",
        "Close*": "close",
    }
    working = df.rename(columns=rename_map)
    working = working[~working.index.duplicated(keep="last")].sort_index()

    dates = [pd.Timestamp(idx).strftime("%Y-%m-%d") for idx in working.index]
    return PriceSeries(
        ticker=ticker.upper(),
        dates=dates,
        close=_column_values(working, "close"),
        adj_close=_column_values(working, "adj_close"),
    )


def _column_values(frame: pd.DataFrame, column: str) -> list[Optional[float]]:
    if column not in frame.columns:
        return [None] * len(frame)
    return [None if pd.isna(value) else float(value) for value in frame[column]]


def _ensure_tickers_first(df: pd.DataFrame) -> pd.DataFrame:
    if not isinstance(df.columns, pd.MultiIndex):
        return df

    level0 = df.columns.get_level_values(0)
    level1 = df.columns.get_level_values(1)

    fields_in_level0 = _has_raw_field(level0)
    fields_in_level1 = _has_raw_field(level1)

    if fields_in_level0 and not fields_in_level1:
        return df.swaplevel(0, 1, axis=1)
    return df


def _has_raw_field(level: Any) -> bool:
    try:
        return bool(set(level) & RAW_FIELD_NAMES)
    except TypeError:
        return False
