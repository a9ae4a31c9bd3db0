"""Utility helpers."""

from .errors import DataRetrievalError, EventsSourceError, MalformedPayloadError, NoDataError, TransportError
from .logging import get_logger

__all__ = [
    "DataRetrievalError",
    "EventsSourceError",
    "MalformedPayloadError",
    "NoDataError",
    "TransportError",
    "get_logger",
]
