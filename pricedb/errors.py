"""Exception types raised by pricedb."""

from __future__ import annotations


class PriceDbError(Exception):
    """Base class for every failure reported to the user."""


class ProviderError(PriceDbError):
    """A price provider reported an error or could not be reached."""

    def __init__(self, symbol: str, message: str):
        self.symbol = symbol
        self.message = message
        super().__init__(f"failed to fetch {symbol}: {message}")


class UnknownSymbolTypeError(PriceDbError, ValueError):
    """A symbol type tag outside {stock, currency}."""


class PriceFileError(PriceDbError):
    """The price-database file could not be opened or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot write {path}: {reason}")


class ConfigError(PriceDbError):
    """Configuration is missing or malformed."""
