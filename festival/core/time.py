"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def as_naive_utc(value: datetime) -> datetime:
    """Drop timezone info after converting to UTC.

    SQLite hands back naive datetimes while freshly created rows still hold
    aware ones, so ordering keys go through this first.
    """

    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


__all__ = ["as_naive_utc", "utcnow"]
