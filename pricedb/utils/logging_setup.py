"""Logging configuration shared by the CLI and scripts."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT)
    root.setLevel(level)
    # urllib3 logs full request URLs, which carry the API keys
    logging.getLogger("urllib3").setLevel(logging.WARNING)
