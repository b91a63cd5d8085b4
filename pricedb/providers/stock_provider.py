"""Stock quote provider — Finnhub-style /quote endpoint."""

from __future__ import annotations

import logging

from pricedb.models import to_quote
from pricedb.providers.base import QuoteProvider

logger = logging.getLogger(__name__)


class StockQuoteProvider(QuoteProvider):
    name = "stock"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://finnhub.io/api/v1/quote",
        timeout: float = 30,
        retries: int = 0,
    ):
        super().__init__(base_url, api_key=api_key, timeout=timeout, retries=retries)

    def get_quote(self, symbol: str) -> str | None:
        logger.info("stock: fetching quote for %s", symbol)
        data = self._get_json(symbol, {"symbol": symbol, "token": self.api_key})
        # "c" is the current (latest close) price
        quote = to_quote(data.get("c"))
        if quote is None:
            logger.debug("stock: no price in response for %s", symbol)
        return quote
