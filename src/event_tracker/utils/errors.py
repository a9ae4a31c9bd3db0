"""Custom exceptions."""

from __future__ import annotations

from typing import Optional


class DataRetrievalError(Exception):
    """Raised when a provider fails to return usable data."""


class TransportError(DataRetrievalError):
    """Non-2xx response or network failure talking to the proxy."""

    def __init__(self, status: Optional[int], snippet: str = "") -> None:
        self.status = status
        self.snippet = snippet
        label = status if status is not None else "network error"
        super().__init__(f"Proxy/Yahoo failed: {label} {snippet}".rstrip())


class MalformedPayloadError(DataRetrievalError):
    """Payload arrived but does not have the chart shape we need."""


class NoDataError(DataRetrievalError):
    """Neither close nor adjusted close held a single finite value."""


class EventsSourceError(Exception):
    """Events list missing or unparsable; never fatal to a render."""
