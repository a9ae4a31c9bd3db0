"""Static events list loaded from a JSON file or URL."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional

import requests

from ..domain import Event
from ..utils import EventsSourceError
from .providers import EventsSource

logger = logging.getLogger(__name__)


def filter_events(records: Iterable[Any], ticker: str) -> list[Event]:
    """Case-insensitive exact ticker match; non-object records are ignored."""
    wanted = ticker.strip().upper()
    events = []
    for record in records:
        if not isinstance(record, Mapping):
            logger.debug("Ignoring non-object event record: %r", record)
            continue
        if str(record.get("ticker") or "").upper() != wanted:
            continue
        events.append(Event.from_record(record))
    return events


class JsonEventsSource(EventsSource):
    """Reads ``[{ticker, date, label}, ...]`` from a local path or http(s) URL."""

    def __init__(self, location: str, timeout: float = 20.0, session: Optional[requests.Session] = None) -> None:
        self.location = location
        self.timeout = timeout
        self.session = session

    @property
    def is_remote(self) -> bool:
        return self.location.lower().startswith(("http://", "https://"))

    def load(self, ticker: str) -> list[Event]:
        records = self._read_records()
        events = filter_events(records, ticker)
        logger.info("Loaded %d event(s) for %s from %s", len(events), ticker.upper(), self.location)
        return events

    def _read_records(self) -> list[Any]:
        text = self._fetch_remote() if self.is_remote else self._read_local()
        try:
            records = json.loads(text)
        except ValueError as err:
            raise EventsSourceError(f"{self.location} parse error: {err}") from err
        if records is None:
            return []
        if not isinstance(records, list):
            raise EventsSourceError(f"{self.location} must contain a JSON array")
        return records

    def _read_local(self) -> str:
        path = Path(self.location)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            raise EventsSourceError(f"{self.location} not readable: {err}") from err

    def _fetch_remote(self) -> str:
        session = self.session or requests.Session()
        try:
            resp = session.get(self.location, headers={"Cache-Control": "no-cache"}, timeout=self.timeout)
        except requests.RequestException as err:
            raise EventsSourceError(f"{self.location} unavailable: {err}") from err
        if not resp.ok:
            raise EventsSourceError(f"{self.location} returned {resp.status_code}")
        return resp.text
