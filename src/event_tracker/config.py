"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .domain import INTERVALS, RANGES

PROVIDERS = ("proxy", "yfinance")

DEFAULT_PROXY_URL = "https://yf-proxy.example.workers.dev/"
DEFAULT_CHART_HOST = "query2.finance.yahoo.com"


@dataclass(frozen=True, slots=True)
class TrackerConfig:
    proxy_url: str = DEFAULT_PROXY_URL
    chart_host: str = DEFAULT_CHART_HOST
    provider: str = "proxy"
    events_source: str = "events.json"
    default_ticker: str = "AAPL"
    range: str = "1y"
    interval: str = "1d"
    window_radius: int = 3
    http_timeout: float = 20.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrackerConfig":
        env = os.environ if environ is None else environ
        defaults = cls()

        provider = env.get("TRACKER_PROVIDER", defaults.provider).strip().lower()
        if provider not in PROVIDERS:
            raise ValueError(f"TRACKER_PROVIDER must be one of {', '.join(PROVIDERS)}, got {provider!r}")

        range_ = env.get("TRACKER_RANGE", defaults.range).strip()
        if range_ not in RANGES:
            raise ValueError(f"TRACKER_RANGE must be one of {', '.join(RANGES)}, got {range_!r}")

        interval = env.get("TRACKER_INTERVAL", defaults.interval).strip()
        if interval not in INTERVALS:
            raise ValueError(f"TRACKER_INTERVAL must be one of {', '.join(INTERVALS)}, got {interval!r}")

        radius = _parse_number(env, "TRACKER_WINDOW_RADIUS", defaults.window_radius, int)
        if radius < 0:
            raise ValueError(f"TRACKER_WINDOW_RADIUS must be non-negative, got {radius}")

        timeout = _parse_number(env, "TRACKER_HTTP_TIMEOUT", defaults.http_timeout, float)
        if timeout <= 0:
            raise ValueError(f"TRACKER_HTTP_TIMEOUT must be positive, got {timeout}")

        return cls(
            proxy_url=env.get("TRACKER_PROXY_URL", defaults.proxy_url).strip(),
            chart_host=env.get("TRACKER_CHART_HOST", defaults.chart_host).strip(),
            provider=provider,
            events_source=env.get("TRACKER_EVENTS_SOURCE", defaults.events_source).strip(),
            default_ticker=env.get("TRACKER_DEFAULT_TICKER", defaults.default_ticker).strip().upper(),
            range=range_,
            interval=interval,
            window_radius=radius,
            http_timeout=timeout,
        )


def _parse_number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as err:
        raise ValueError(f"{name} must be a number, got {raw!r}") from err
