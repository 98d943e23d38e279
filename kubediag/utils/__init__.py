"""Utility helpers for the KubeDiag TUI."""

from kubediag.utils.formatting import format_timestamp, pluralize, truncate
from kubediag.utils.logging_setup import configure_logging

__all__ = ["configure_logging", "format_timestamp", "pluralize", "truncate"]
