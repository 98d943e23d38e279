"""Logging configuration for the KubeDiag TUI.

The TUI owns the terminal, so log records go to a file when one is
configured and are otherwise dropped by a NullHandler on the package logger.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_PACKAGE_LOGGER = "kubediag"


def configure_logging(level: str = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Configure the ``kubediag`` logger and return it."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger


__all__ = ["LOG_FORMAT", "configure_logging"]
