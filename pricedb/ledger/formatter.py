"""Render fetched quotes as ledger price-database lines."""

from __future__ import annotations

from datetime import date, datetime

import pytz

from pricedb.models import PriceEntry


def today(timezone: str | None = None) -> date:
    """Current date, in `timezone` if given, else the system local date."""
    if timezone:
        return datetime.now(pytz.timezone(timezone)).date()
    return date.today()


def build_entries(
    quotes: dict[str, str],
    unit: str = "USD",
    on_date: date | None = None,
) -> list[PriceEntry]:
    on_date = on_date or today()
    return [PriceEntry(on_date, symbol, value, unit) for symbol, value in quotes.items()]


def format_entries(
    quotes: dict[str, str],
    unit: str = "USD",
    on_date: date | None = None,
) -> str:
    """Format {symbol: value} as newline-joined `P <date> <symbol> <value> <unit>` lines.

    The date is captured once for the whole call. No trailing newline.
    """
    return "\n".join(entry.to_line() for entry in build_entries(quotes, unit, on_date))
