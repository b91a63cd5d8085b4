"""Append formatted entries to the price-database file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pricedb.errors import PriceFileError

logger = logging.getLogger(__name__)


def append_entries(path: str | Path, separator: str, text: str) -> None:
    """Append `separator + text` to the end of `path` and fsync it.

    The file is created if missing; existing content is never read.
    Raises PriceFileError if the file cannot be opened or written.
    """
    p = Path(path).expanduser()
    try:
        with open(p, "a", encoding="utf-8", newline="") as f:
            f.write(separator + text)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        raise PriceFileError(str(p), e.strerror or str(e)) from e
    logger.info("Appended %d chars to %s", len(separator) + len(text), p)
