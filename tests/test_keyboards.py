from datetime import date
import calendar

from moodiary.keyboards.inline import NOOP, calendar_keyboard, mood_keyboard
from moodiary.services.calendar_grid import generate

HAPPY = "\U0001f60a"


def _moods(day):
    return HAPPY if day == 10 else ""


def test_calendar_keyboard_layout(today):
    grid = generate(2024, 2)
    kb = calendar_keyboard(grid, _moods, today, today, calendar.SUNDAY)
    rows = kb.inline_keyboard

    assert rows[0][0].text == "March 2024"
    assert [b.text for b in rows[1]] == ["S", "M", "T", "W", "T", "F", "S"]
    assert rows[-1][0].callback_data == "cal:nav:-1"
    assert rows[-1][1].callback_data == "cal:nav:1"

    day_rows = rows[2:-1]
    assert all(len(row) == 7 for row in day_rows)
    assert [b.callback_data for b in day_rows[0][:5]] == [NOOP] * 5
    assert day_rows[0][5].callback_data == "cal:day:2024-03-01"


def test_calendar_keyboard_marks(today):
    grid = generate(2024, 2)
    kb = calendar_keyboard(grid, _moods, date(2024, 3, 20), today, calendar.SUNDAY)
    buttons = {
        b.callback_data: b.text
        for row in kb.inline_keyboard
        for b in row
        if b.callback_data.startswith("cal:day:")
    }
    assert buttons["cal:day:2024-03-10"] == f"·{HAPPY}"
    assert buttons["cal:day:2024-03-14"] == "·14"
    assert buttons["cal:day:2024-03-15"] == "15"
    assert buttons["cal:day:2024-03-20"] == "•20•"


def test_mood_keyboard():
    kb = mood_keyboard(HAPPY)
    row = kb.inline_keyboard[0]
    assert [b.callback_data for b in row] == [f"mood:{i}" for i in range(1, 6)]
    assert row[3].text == f"✓{HAPPY}"
    assert row[0].text == "\U0001f621"
