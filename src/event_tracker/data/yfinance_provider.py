"""yfinance-backed prices provider."""

from __future__ import annotations

import logging

import yfinance as yf

from ..domain import ChartQuery, PriceSeries
from ..utils import DataRetrievalError
from ..utils.yf_patch import patch_yfinance
from .normalization import series_from_yfinance_frame
from .providers import PricesProvider

logger = logging.getLogger(__name__)


class YFinancePricesProvider(PricesProvider):
    """Adapter around yfinance.download that emits raw PriceSeries."""

    def __init__(self) -> None:
        patch_yfinance()

    def fetch_series(self, query: ChartQuery) -> PriceSeries:
        try:
            raw = yf.download(
                tickers=query.ticker,
                period=query.range,
                interval=query.interval,
                auto_adjust=False,
                group_by="ticker",
                progress=False,
                threads=False,
            )
        except Exception as err:  # pragma: no cover - network issues surface here
            raise DataRetrievalError(f"yfinance download failed: {err}") from err

        if isinstance(raw, tuple):
            raw = raw[0]

        return series_from_yfinance_frame(raw, query.ticker)
