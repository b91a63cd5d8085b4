"""YAML config loader and provider factory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import pytz
import yaml

from pricedb.errors import ConfigError
from pricedb.models import SymbolType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/pricedb.yml"

DEFAULT_STOCK_URL = "https://finnhub.io/api/v1/quote"
DEFAULT_CURRENCY_URL = "http://api.exchangeratesapi.io/v1/latest"


@dataclass
class HttpConfig:
    stock_url: str = DEFAULT_STOCK_URL
    currency_url: str = DEFAULT_CURRENCY_URL
    timeout: float = 30
    retries: int = 0


@dataclass
class PriceDbConfig:
    stock_api_key: str = ""
    currency_api_key: str = ""
    output_file: str = ""
    default_denomination: str = "USD"
    # unit written after stock prices; the stock provider quotes in USD
    stock_unit: str = "USD"
    entry_separator: str = "\n"
    entry_timezone: str | None = None
    stocks: list[str] = field(default_factory=list)
    currencies: list[str] = field(default_factory=list)
    http: HttpConfig = field(default_factory=HttpConfig)

    def symbols_for(self, symbol_type: SymbolType) -> list[str]:
        if symbol_type is SymbolType.STOCK:
            return self.stocks
        return self.currencies

    def require_output_file(self) -> Path:
        if not self.output_file:
            raise ConfigError("output_file is not set")
        return Path(self.output_file).expanduser()


def load_yaml(path: str) -> dict:
    """Load a YAML config file safely."""
    p = Path(path).expanduser()
    try:
        with open(p) as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {p}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {p} must contain a mapping")
    return data


def load_config(path: str | None = None) -> PriceDbConfig:
    """Build a PriceDbConfig from YAML, with API keys overridable from env.

    The path defaults to $PRICEDB_CONFIG, then config/pricedb.yml.
    """
    path = path or os.environ.get("PRICEDB_CONFIG", DEFAULT_CONFIG_PATH)
    cfg = load_yaml(path)
    logger.debug("Loaded config from %s", path)
    return config_from_dict(cfg)


def config_from_dict(cfg: dict) -> PriceDbConfig:
    http_cfg = cfg.get("http") or {}
    if not isinstance(http_cfg, dict):
        raise ConfigError("'http' must be a mapping")

    return PriceDbConfig(
        stock_api_key=os.environ.get(
            "PRICEDB_STOCK_API_KEY", str(cfg.get("stock_api_key") or "")
        ),
        currency_api_key=os.environ.get(
            "PRICEDB_CURRENCY_API_KEY", str(cfg.get("currency_api_key") or "")
        ),
        output_file=str(cfg.get("output_file") or ""),
        default_denomination=str(cfg.get("default_denomination") or "USD").upper(),
        stock_unit=str(cfg.get("stock_unit") or "USD"),
        entry_separator=_separator(cfg.get("entry_separator")),
        entry_timezone=_timezone(cfg.get("entry_timezone")),
        stocks=_symbol_list(cfg, "stocks"),
        currencies=_symbol_list(cfg, "currencies"),
        http=HttpConfig(
            stock_url=http_cfg.get("stock_url") or DEFAULT_STOCK_URL,
            currency_url=http_cfg.get("currency_url") or DEFAULT_CURRENCY_URL,
            timeout=_number(http_cfg, "timeout", float, 30),
            retries=_number(http_cfg, "retries", int, 0),
        ),
    )


def _separator(value) -> str:
    # an explicit "" is allowed; only a missing or null key means the default
    if value is None:
        return "\n"
    return str(value)


def _number(cfg: dict, key: str, cast, default):
    value = cfg.get(key)
    if value is None:
        return default
    try:
        result = cast(value)
    except (TypeError, ValueError):
        raise ConfigError(f"http.{key} must be a number, got '{value}'") from None
    if result < 0:
        raise ConfigError(f"http.{key} must not be negative, got {value}")
    return result


def _timezone(name) -> str | None:
    if not name:
        return None
    try:
        pytz.timezone(str(name))
    except pytz.UnknownTimeZoneError:
        raise ConfigError(f"Unknown entry_timezone '{name}'") from None
    return str(name)


def _symbol_list(cfg: dict, key: str) -> list[str]:
    raw = cfg.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError(f"'{key}' must be a list of symbols, got {type(raw).__name__}")
    symbols = []
    for item in raw:
        s = str(item).strip()
        if s:
            symbols.append(s)
    return symbols


def build_provider(symbol_type: SymbolType | str, config: PriceDbConfig):
    """Instantiate the quote provider for a symbol type."""
    from pricedb.providers.currency_provider import CurrencyRateProvider
    from pricedb.providers.stock_provider import StockQuoteProvider

    provider_map = {
        SymbolType.STOCK: lambda: StockQuoteProvider(
            api_key=config.stock_api_key,
            base_url=config.http.stock_url,
            timeout=config.http.timeout,
            retries=config.http.retries,
        ),
        SymbolType.CURRENCY: lambda: CurrencyRateProvider(
            api_key=config.currency_api_key,
            base_url=config.http.currency_url,
            denomination=config.default_denomination,
            timeout=config.http.timeout,
            retries=config.http.retries,
        ),
    }
    return provider_map[SymbolType.parse(symbol_type)]()
