"""Small text formatting helpers used by presenters."""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime


def truncate(text: str, max_length: int) -> str:
    """Shorten ``text`` to ``max_length`` characters with a trailing ellipsis."""
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."


def format_timestamp(value: str) -> str:
    """Render an ISO-8601 timestamp as local ``YYYY-MM-DD HH:MM:SS``.

    Unparseable values are returned unchanged.
    """
    if not value:
        return ""
    with suppress(ValueError):
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
        return parsed.strftime("%Y-%m-%d %H:%M:%S")
    return value


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"
