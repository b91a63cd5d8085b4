"""QuoteProvider base class — one HTTP GET per symbol."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from urllib.parse import quote_plus

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from pricedb.errors import ProviderError

logger = logging.getLogger(__name__)


class QuoteProvider(ABC):
    """Interface for the stock and currency price providers."""

    name: str = "base"

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 30,
        retries: int = 0,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self.session = requests.Session()
        if retries:
            retry = Retry(
                total=retries,
                backoff_factor=1,
                status_forcelist=[500, 502, 503, 504],
            )
            self.session.mount("https://", HTTPAdapter(max_retries=retry))
            self.session.mount("http://", HTTPAdapter(max_retries=retry))

    @abstractmethod
    def get_quote(self, symbol: str) -> str | None:
        """Fetch the current value for one symbol.

        Returns the value as decimal text, or None when the response
        carries no value for the symbol. Raises ProviderError when the
        provider reports an error.
        """
        ...

    def close(self) -> None:
        self.session.close()

    def _get_json(self, symbol: str, params: dict) -> dict:
        """GET base_url with params and return the decoded JSON object.

        An `error` field in the body takes precedence over the HTTP status.
        """
        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderError(symbol, self._redact(f"{e.__class__.__name__}: {e}")) from e

        try:
            data = resp.json(parse_float=Decimal)
        except ValueError:
            data = None

        if isinstance(data, dict):
            message = _error_message(data.get("error"))
            if message:
                raise ProviderError(symbol, self._redact(message))

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise ProviderError(symbol, f"HTTP {resp.status_code} {resp.reason}") from e

        if not isinstance(data, dict):
            raise ProviderError(symbol, "response is not a JSON object")
        return data

    def _redact(self, text: str) -> str:
        # request URLs in exception text carry the key as a query param
        if self.api_key:
            for secret in (self.api_key, quote_plus(self.api_key)):
                text = text.replace(secret, "***")
        return text


def _error_message(error) -> str:
    """Extract a message from a string or {code, type, info} error field."""
    if not error:
        return ""
    if isinstance(error, dict):
        return str(error.get("info") or error.get("type") or error)
    return str(error)
