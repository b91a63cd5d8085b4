"""Update workflow: fetch quotes, format entries, append to the price db."""

from __future__ import annotations

import logging

from pricedb.ledger.formatter import format_entries, today
from pricedb.ledger.writer import append_entries
from pricedb.models import SymbolType
from pricedb.providers.base import QuoteProvider
from pricedb.utils.config import PriceDbConfig, build_provider

logger = logging.getLogger(__name__)


def fetch_quote(
    symbol: str,
    symbol_type: SymbolType | str,
    config: PriceDbConfig,
    denomination: str | None = None,
    provider: QuoteProvider | None = None,
) -> str | None:
    """Fetch one symbol's price (stock) or rate (currency).

    Returns None when the provider has no value for the symbol.
    Raises ProviderError when the provider reports an error and
    UnknownSymbolTypeError for an unrecognized type tag.
    """
    symbol_type = SymbolType.parse(symbol_type)
    owned = provider is None
    if owned:
        provider = build_provider(symbol_type, config)
    try:
        if symbol_type is SymbolType.CURRENCY:
            return provider.get_quote(symbol, denomination or config.default_denomination)
        return provider.get_quote(symbol)
    finally:
        if owned:
            provider.close()


def collect_quotes(
    symbols: list[str],
    symbol_type: SymbolType | str,
    config: PriceDbConfig,
    provider: QuoteProvider | None = None,
) -> dict[str, str]:
    """Fetch every symbol in order and map symbol -> quote.

    Symbols without a value are left out. A repeated symbol is fetched
    again and its last value wins. The first error aborts the batch.
    """
    symbol_type = SymbolType.parse(symbol_type)
    owned = provider is None
    if owned:
        provider = build_provider(symbol_type, config)

    result: dict[str, str] = {}
    try:
        for symbol in symbols:
            quote = fetch_quote(symbol, symbol_type, config, provider=provider)
            if quote is not None:
                result[symbol] = quote
    finally:
        if owned:
            provider.close()

    missing = len(set(symbols)) - len(result)
    if missing > 0:
        logger.warning(
            "%s: %d/%d symbols returned no value",
            symbol_type.value, missing, len(set(symbols)),
        )
    return result


def update_stocks(
    config: PriceDbConfig,
    dry_run: bool = False,
    provider: QuoteProvider | None = None,
) -> str:
    """Fetch configured stock prices and append them. Returns the entry text."""
    return _update(SymbolType.STOCK, config, config.stock_unit, dry_run, provider)


def update_currencies(
    config: PriceDbConfig,
    dry_run: bool = False,
    provider: QuoteProvider | None = None,
) -> str:
    """Fetch configured exchange rates and append them. Returns the entry text."""
    return _update(
        SymbolType.CURRENCY, config, config.default_denomination, dry_run, provider
    )


def _update(
    symbol_type: SymbolType,
    config: PriceDbConfig,
    unit: str,
    dry_run: bool,
    provider: QuoteProvider | None,
) -> str:
    output = None if dry_run else config.require_output_file()
    symbols = config.symbols_for(symbol_type)
    if not symbols:
        logger.warning("No %s symbols configured — nothing to update", symbol_type.value)
        return ""

    quotes = collect_quotes(symbols, symbol_type, config, provider=provider)
    text = format_entries(quotes, unit=unit, on_date=today(config.entry_timezone))

    if not text:
        logger.warning("No %s quotes fetched — nothing appended", symbol_type.value)
        return ""
    if dry_run:
        logger.info("Dry run: %d %s entries not written", len(quotes), symbol_type.value)
        return text

    append_entries(output, config.entry_separator, text)
    logger.info("Appended %d %s entries to %s", len(quotes), symbol_type.value, output)
    return text
