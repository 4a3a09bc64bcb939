"""Opt-in logging setup for applications using tick-nav.

The library itself only creates module loggers. Call configure_logging()
once from an entrypoint to see them on stdout.
"""
from __future__ import annotations

import logging
import sys


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a stdout handler to the root logger unless one already exists."""
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(level)
