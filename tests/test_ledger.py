"""Tests for entry formatting and appending to the price db."""

from datetime import date
from unittest.mock import patch

import pytest

from pricedb.errors import PriceFileError, UnknownSymbolTypeError
from pricedb.ledger.formatter import format_entries, today
from pricedb.ledger.writer import append_entries
from pricedb.models import PriceEntry, SymbolType, to_quote

DAY = date(2024, 1, 15)


class TestFormatEntries:
    def test_single_line(self):
        assert format_entries({"AAPL": "172.5"}, on_date=DAY) == "P 2024-01-15 AAPL 172.5 USD"

    def test_lines_joined_in_mapping_order(self):
        text = format_entries({"MSFT": "410", "AAPL": "172.5"}, on_date=DAY)
        assert text == "P 2024-01-15 MSFT 410 USD\nP 2024-01-15 AAPL 172.5 USD"

    def test_no_trailing_newline(self):
        assert not format_entries({"AAPL": "1"}, on_date=DAY).endswith("\n")

    def test_custom_unit(self):
        assert format_entries({"EUR": "0.86"}, unit="GBP", on_date=DAY) == "P 2024-01-15 EUR 0.86 GBP"

    def test_empty_mapping(self):
        assert format_entries({}, on_date=DAY) == ""

    def test_same_input_same_output(self):
        quotes = {"AAPL": "172.5", "EUR": "1.09"}
        assert format_entries(quotes, on_date=DAY) == format_entries(quotes, on_date=DAY)

    def test_date_captured_once(self):
        with patch("pricedb.ledger.formatter.today", side_effect=[DAY, date(2024, 1, 16)]) as mock_today:
            text = format_entries({"AAPL": "1", "MSFT": "2"})
        assert mock_today.call_count == 1
        assert text.count("2024-01-15") == 2

    def test_today_in_timezone(self):
        assert isinstance(today("America/New_York"), date)

    def test_today_local(self):
        assert today() == date.today()


class TestPriceEntry:
    def test_to_line(self):
        assert PriceEntry(DAY, "EUR", "1.09", "USD").to_line() == "P 2024-01-15 EUR 1.09 USD"


class TestToQuote:
    def test_float(self):
        assert to_quote(172.5) == "172.5"

    def test_int(self):
        assert to_quote(100) == "100"

    def test_numeric_string(self):
        assert to_quote(" 1.25 ") == "1.25"

    def test_large_float_no_exponent(self):
        assert to_quote(1.5e16) == "15000000000000000"

    def test_rejects_non_numbers(self):
        assert to_quote(None) is None
        assert to_quote(True) is None
        assert to_quote("n/a") is None
        assert to_quote(float("nan")) is None


class TestSymbolType:
    def test_parse_tags(self):
        assert SymbolType.parse("stock") is SymbolType.STOCK
        assert SymbolType.parse("Currency") is SymbolType.CURRENCY
        assert SymbolType.parse(SymbolType.STOCK) is SymbolType.STOCK

    def test_unknown_tag(self):
        with pytest.raises(UnknownSymbolTypeError, match="bond"):
            SymbolType.parse("bond")

    def test_unknown_tag_is_value_error(self):
        with pytest.raises(ValueError):
            SymbolType.parse("")


class TestAppendEntries:
    def test_creates_file(self, tmp_path):
        path = tmp_path / "prices.db"
        append_entries(path, "\n", "P 2024-01-15 AAPL 172.5 USD")
        assert path.read_text() == "\nP 2024-01-15 AAPL 172.5 USD"

    def test_appends_after_existing_content(self, tmp_path):
        path = tmp_path / "prices.db"
        path.write_text("P 2024-01-14 AAPL 170 USD")
        append_entries(path, "\n", "P 2024-01-15 AAPL 172.5 USD")
        assert path.read_text() == "P 2024-01-14 AAPL 170 USD\nP 2024-01-15 AAPL 172.5 USD"

    def test_no_newline_after_separator_or_text(self, tmp_path):
        path = tmp_path / "prices.db"
        append_entries(path, ";; update\n", "X")
        assert path.read_text() == ";; update\nX"

    def test_repeated_appends_concatenate(self, tmp_path):
        one = tmp_path / "one.db"
        two = tmp_path / "two.db"
        append_entries(one, "\n", "A")
        append_entries(one, "\n", "B")
        append_entries(two, "\n", "A\nB")
        assert one.read_text() == two.read_text()

    def test_unwritable_path(self, tmp_path):
        path = tmp_path / "missing-dir" / "prices.db"
        with pytest.raises(PriceFileError) as exc:
            append_entries(path, "\n", "A")
        assert exc.value.path == str(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(PriceFileError):
            append_entries(tmp_path, "\n", "A")

    def test_expands_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        append_entries("~/prices.db", "", "A")
        assert (tmp_path / "prices.db").read_text() == "A"
