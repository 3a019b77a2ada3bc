"""Month layout calculations for the calendar keyboard.

Months are 0-based (0 = January, 11 = December) throughout this module, the
same convention the persisted calendar view uses.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    days_in_month: int
    first_weekday_offset: int
    days: tuple[int, ...]

    def weeks(self) -> list[list[int | None]]:
        """Split the month into rows of seven cells, None for padding."""
        cells: list[int | None] = [None] * self.first_weekday_offset
        cells.extend(self.days)
        cells.extend([None] * (-len(cells) % 7))
        return [cells[i : i + 7] for i in range(0, len(cells), 7)]

    def date_of(self, day: int) -> date:
        return date(self.year, self.month + 1, day)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Add ``delta`` months to (year, month), carrying into the year."""
    years, new_month = divmod(month + delta, 12)
    return year + years, new_month


def generate(year: int, month: int, first_weekday: int = calendar.SUNDAY) -> MonthGrid:
    """Lay out (year, month) for rendering.

    ``first_weekday`` uses the ``calendar`` module constants (MONDAY=0 ...
    SUNDAY=6). Out-of-range months wrap like ``shift_month`` and years are
    clamped to what ``datetime.date`` supports.
    """
    year, month = shift_month(year, month, 0)
    year = min(max(year, MINYEAR), MAXYEAR)

    first_day_weekday, days_in_month = calendar.monthrange(year, month + 1)
    offset = (first_day_weekday - first_weekday) % 7

    return MonthGrid(
        year=year,
        month=month,
        days_in_month=days_in_month,
        first_weekday_offset=offset,
        days=tuple(range(1, days_in_month + 1)),
    )


def weekday_initials(first_weekday: int = calendar.SUNDAY) -> list[str]:
    names = calendar.day_abbr
    return [names[(first_weekday + i) % 7][0] for i in range(7)]


def month_title(year: int, month: int) -> str:
    return f"{calendar.month_name[month + 1]} {year}"
