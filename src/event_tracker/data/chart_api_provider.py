"""Chart-API prices provider that goes through a CORS-relay proxy."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import requests

from ..domain import ChartQuery, PriceSeries
from ..utils import MalformedPayloadError, TransportError
from .normalization import parse_chart_payload
from .providers import PricesProvider

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 160


class ChartApiPricesProvider(PricesProvider):
    """Fetch ``/v8/finance/chart/<ticker>`` via ``<proxy>?url=<upstream>``."""

    def __init__(
        self,
        proxy_url: str,
        chart_host: str = "query2.finance.yahoo.com",
        timeout: float = 20.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.proxy_url = proxy_url
        self.chart_host = chart_host
        self.timeout = timeout
        self.session = session or requests.Session()

    def upstream_url(self, query: ChartQuery) -> str:
        return (
            f"https://{self.chart_host}/v8/finance/chart/{quote(query.ticker, safe='')}"
            f"?range={quote(query.range, safe='')}&interval={quote(query.interval, safe='')}"
        )

    def fetch_series(self, query: ChartQuery) -> PriceSeries:
        url = self.upstream_url(query)
        logger.info("Fetching %s (%s, %s) via proxy", query.ticker, query.range, query.interval)

        try:
            resp = self.session.get(
                self.proxy_url,
                params={"url": url},
                headers={"Cache-Control": "no-cache"},
                timeout=self.timeout,
            )
        except requests.RequestException as err:
            raise TransportError(None, str(err)[:SNIPPET_LENGTH]) from err

        if not resp.ok:
            raise TransportError(resp.status_code, (resp.text or "")[:SNIPPET_LENGTH])

        try:
            payload = resp.json()
        except ValueError as err:
            raise MalformedPayloadError(f"Invalid JSON from proxy: {err}") from err

        return parse_chart_payload(payload, query.ticker)
