from __future__ import annotations

from datetime import date
from typing import Callable

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from moodiary.services.calendar_grid import MonthGrid, month_title, weekday_initials
from moodiary.services.edit_window import is_editable
from moodiary.services.moods import MOODS

NOOP = "cal:noop"
_SELECTED_MARK = "•"
_PAST_MARK = "·"


def _noop_button(text: str) -> InlineKeyboardButton:
    return InlineKeyboardButton(text=text, callback_data=NOOP)


def calendar_keyboard(
    grid: MonthGrid,
    mood_for_day: Callable[[int], str],
    selected: date,
    today: date,
    first_weekday: int,
) -> InlineKeyboardMarkup:
    """Month grid: title, weekday initials, day cells, navigation.

    A day with an entry shows its mood instead of the number. Every day is
    clickable; the handler decides whether it can be selected.
    """
    rows: list[list[InlineKeyboardButton]] = [
        [_noop_button(month_title(grid.year, grid.month))],
        [_noop_button(initial) for initial in weekday_initials(first_weekday)],
    ]

    for week in grid.weeks():
        row: list[InlineKeyboardButton] = []
        for day in week:
            if day is None:
                row.append(_noop_button(" "))
                continue
            cell_date = grid.date_of(day)
            label = mood_for_day(day) or str(day)
            if cell_date == selected:
                label = f"{_SELECTED_MARK}{label}{_SELECTED_MARK}"
            elif not is_editable(cell_date, today):
                label = f"{_PAST_MARK}{label}"
            row.append(InlineKeyboardButton(
                text=label,
                callback_data=f"cal:day:{cell_date.isoformat()}",
            ))
        rows.append(row)

    rows.append([
        InlineKeyboardButton(text="◀", callback_data="cal:nav:-1"),
        InlineKeyboardButton(text="▶", callback_data="cal:nav:1"),
    ])
    return InlineKeyboardMarkup(inline_keyboard=rows)


def mood_keyboard(current: str | None = None) -> InlineKeyboardMarkup:
    row = []
    for mood in MOODS:
        check = "✓" if mood.symbol == current else ""
        row.append(InlineKeyboardButton(
            text=f"{check}{mood.symbol}",
            callback_data=f"mood:{mood.rank}",
        ))
    return InlineKeyboardMarkup(inline_keyboard=[row])
