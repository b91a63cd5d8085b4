"""Shared types used across all modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum

from pricedb.errors import UnknownSymbolTypeError


class SymbolType(Enum):
    STOCK = "stock"
    CURRENCY = "currency"

    @classmethod
    def parse(cls, tag: str | SymbolType) -> SymbolType:
        """Map a tag string (or member) to a SymbolType."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            raise UnknownSymbolTypeError(
                f"Unknown symbol type '{tag}'. Available: {[t.value for t in cls]}"
            ) from None


@dataclass(frozen=True)
class PriceEntry:
    date: date
    symbol: str
    value: str
    unit: str = "USD"

    def to_line(self) -> str:
        return f"P {self.date.isoformat()} {self.symbol} {self.value} {self.unit}"


def to_quote(value) -> str | None:
    """Render a JSON number as plain decimal text.

    Keeps the digits the provider sent (172.5 -> "172.5", 100 -> "100") and
    never uses exponent notation. Returns None for null, booleans and
    anything that is not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    try:
        if isinstance(value, float):
            dec = Decimal(repr(value))
        else:
            dec = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not dec.is_finite():
        return None
    return format(dec, "f")
