"""Calendar-day keys.

Entries are keyed by the short ``M/D/YYYY`` rendering of their day. Every key
is built by ``day_key`` so two paths to the same day give the same string.
"""

from __future__ import annotations

from datetime import date, datetime


def day_key(day: date) -> str:
    if isinstance(day, datetime):
        day = day.date()
    return f"{day.month}/{day.day}/{day.year}"


def parse_day_key(key: str) -> date | None:
    """Inverse of ``day_key``; None for anything that is not a valid day."""
    try:
        month, day, year = (int(part) for part in key.strip().split("/"))
        return date(year, month, day)
    except (AttributeError, ValueError):
        return None


def as_day(value: date | str) -> date | None:
    """Normalise a date, datetime or day key to a plain ``date``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_day_key(value)
    return None
