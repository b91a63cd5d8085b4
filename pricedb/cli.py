"""CLI entry point for the price update commands.

Run:
    pricedb stocks
    pricedb currencies --config ~/.config/pricedb.yml
    python -m pricedb all --dry-run
"""

from __future__ import annotations

import argparse
import logging
import sys

from pricedb.errors import PriceDbError
from pricedb.updater import update_currencies, update_stocks
from pricedb.utils.config import load_config
from pricedb.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)

COMMANDS = {
    "stocks": [update_stocks],
    "currencies": [update_currencies],
    "all": [update_stocks, update_currencies],
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="pricedb",
        description="Append current stock prices and exchange rates to a ledger price db",
    )
    p.add_argument("command", choices=list(COMMANDS),
                   help="Which symbol list to update")
    p.add_argument("--config", default=None,
                   help="Path to YAML config (default: $PRICEDB_CONFIG or config/pricedb.yml)")
    p.add_argument("--dry-run", action="store_true",
                   help="Print the entries without writing the price db")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Enable debug logging")
    return p.parse_args(argv)


def run(command: str, config_path: str | None = None, dry_run: bool = False) -> str:
    """Run one CLI command and return the combined entry text."""
    config = load_config(config_path)
    outputs = [update(config, dry_run=dry_run) for update in COMMANDS[command]]
    return "\n".join(text for text in outputs if text)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        text = run(args.command, args.config, dry_run=args.dry_run)
    except PriceDbError as e:
        logger.error("Update failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if text:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
