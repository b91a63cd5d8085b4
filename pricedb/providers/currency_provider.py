"""Exchange-rate provider — exchangeratesapi-style /latest endpoint."""

from __future__ import annotations

import logging

from pricedb.models import to_quote
from pricedb.providers.base import QuoteProvider

logger = logging.getLogger(__name__)


class CurrencyRateProvider(QuoteProvider):
    name = "currency"

    def __init__(
        self,
        api_key: str,
        base_url: str = "http://api.exchangeratesapi.io/v1/latest",
        denomination: str = "USD",
        timeout: float = 30,
        retries: int = 0,
    ):
        super().__init__(base_url, api_key=api_key, timeout=timeout, retries=retries)
        self.denomination = denomination

    def get_quote(self, symbol: str, denomination: str | None = None) -> str | None:
        """Rate of one unit of `symbol` expressed in `denomination`."""
        denomination = denomination or self.denomination
        logger.info("currency: fetching %s/%s", symbol, denomination)
        data = self._get_json(symbol, {"base": symbol, "access_key": self.api_key})
        rates = data.get("rates")
        if not isinstance(rates, dict) or denomination not in rates:
            logger.debug("currency: no %s rate in response for %s", denomination, symbol)
            return None
        return to_quote(rates[denomination])
