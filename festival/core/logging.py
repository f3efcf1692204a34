"""Logging setup shared by the API and the services."""

from __future__ import annotations

import logging
import sys

from .config import LOG_LEVEL

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Install a console handler on the ``festival`` logger once."""

    global _configured
    if _configured:
        return

    level_name = (level or LOG_LEVEL or "INFO").upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))

    root = logging.getLogger("festival")
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
