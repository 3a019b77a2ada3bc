from __future__ import annotations

from datetime import date

from moodiary.services.days import as_day


def is_editable(candidate: date | str, today: date | None = None) -> bool:
    """True when ``candidate`` is today or later, compared by calendar day.

    Datetimes are truncated to their day, and a day key that does not parse
    is never editable.
    """
    day = as_day(candidate)
    if day is None:
        return False
    current = as_day(today) if today is not None else date.today()
    return day >= current
