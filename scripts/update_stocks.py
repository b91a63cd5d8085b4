"""Entry point: append current stock prices to the price db."""

import sys
from pathlib import Path

# Ensure project root is on sys.path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pricedb.cli import main

if __name__ == "__main__":
    sys.exit(main(["stocks", *sys.argv[1:]]))
