"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from typing import Any, Dict, List

import pytest

from event_tracker import Event


@pytest.fixture
def trading_dates() -> List[str]:
    """Seven trading days, 2024-01-02 .. 2024-01-10 (weekend 6th/7th excluded)."""
    return [
        "2024-01-02",
        "2024-01-03",
        "2024-01-04",
        "2024-01-05",
        "2024-01-08",
        "2024-01-09",
        "2024-01-10",
    ]


@pytest.fixture
def trading_timestamps(trading_dates) -> List[int]:
    """UNIX seconds at 14:30 UTC for each trading date."""
    return [
        int(datetime.strptime(d, "%Y-%m-%d").replace(hour=14, minute=30, tzinfo=timezone.utc).timestamp())
        for d in trading_dates
    ]


@pytest.fixture
def aapl_events() -> List[Event]:
    return [
        Event(ticker="AAPL", date="2024-01-04", label="Supplier update"),
        Event(ticker="AAPL", date="2024-01-07", label="Sunday announcement"),
        Event(ticker="AAPL", date="2024-01-09"),
    ]


def make_chart_payload(timestamps, close, adjclose=None) -> Dict[str, Any]:
    """Build a v8 chart response body."""
    indicators: Dict[str, Any] = {"quote": [{"close": close}]}
    if adjclose is not None:
        indicators["adjclose"] = [{"adjclose": adjclose}]
    return {
        "chart": {
            "result": [{"meta": {"symbol": "AAPL"}, "timestamp": timestamps, "indicators": indicators}],
            "error": None,
        }
    }


@pytest.fixture
def chart_payload_factory():
    return make_chart_payload
