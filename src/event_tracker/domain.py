from __future__ import annotations

"""Domain models shared by the data, analytics and viz layers."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

import pandas as pd

SeriesField = Literal["close", "adj_close"]

RANGES = ("1mo", "3mo", "6mo", "1y", "5y", "max")
INTERVALS = ("1d", "1wk", "1mo")
DEFAULT_EVENT_LABEL = "Event"


@dataclass(slots=True)
class ChartQuery:
    ticker: str
    range: str = "1y"
    interval: str = "1d"

    def __post_init__(self) -> None:
        self.ticker = (self.ticker or "").strip().upper()
        if not self.ticker:
            raise ValueError("Ticker must not be empty")
        if self.range not in RANGES:
            raise ValueError(f"Unsupported range {self.range!r}; expected one of {', '.join(RANGES)}")
        if self.interval not in INTERVALS:
            raise ValueError(f"Unsupported interval {self.interval!r}; expected one of {', '.join(INTERVALS)}")


@dataclass(slots=True)
class PriceSeries:
    """Raw upstream series; both candidate value arrays share the ``dates`` axis."""

    ticker: str
    dates: list[str]
    close: list[Optional[float]]
    adj_close: list[Optional[float]] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CleanedSeries:
    dates: tuple[str, ...] = ()
    values: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.dates)

    @property
    def empty(self) -> bool:
        return not self.dates

    def to_frame(self) -> pd.DataFrame:
        frame = pd.DataFrame({"date": list(self.dates), "value": list(self.values)})
        frame["date"] = pd.to_datetime(frame["date"], format="%Y-%m-%d")
        frame["value"] = frame["value"].astype("float64")
        return frame


@dataclass(frozen=True, slots=True)
class Event:
    ticker: str
    date: str
    label: str = DEFAULT_EVENT_LABEL

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Event":
        return cls(
            ticker=str(record.get("ticker") or "").upper(),
            date=str(record.get("date") or ""),
            label=str(record.get("label") or DEFAULT_EVENT_LABEL),
        )


@dataclass(frozen=True, slots=True)
class AnnotationWindow:
    key: str
    start_date: str
    end_date: str
    label: str
    event_date: str
    start_index: int
    end_index: int


@dataclass(slots=True)
class ChartPayload:
    """Everything one render cycle needs: parallel dates/values plus windows."""

    ticker: str
    dates: list[str]
    values: list[float]
    windows: list[AnnotationWindow] = field(default_factory=list)
    series_field: SeriesField = "close"
    events: list[Event] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.dates
