import calendar

import pytest

from moodiary.services.calendar_grid import (
    generate,
    month_title,
    shift_month,
    weekday_initials,
)


@pytest.mark.parametrize(
    "year, month, expected",
    [
        (2024, 1, 29),
        (2023, 1, 28),
        (2000, 1, 29),
        (1900, 1, 28),
        (2024, 0, 31),
        (2024, 3, 30),
        (2024, 11, 31),
    ],
)
def test_days_in_month(year, month, expected):
    grid = generate(year, month)
    assert grid.days_in_month == expected
    assert grid.days == tuple(range(1, expected + 1))


def test_first_weekday_offset_sunday_start():
    # 1 September 2024 was a Sunday, 1 March 2024 a Friday
    assert generate(2024, 8).first_weekday_offset == 0
    assert generate(2024, 2).first_weekday_offset == 5


def test_first_weekday_offset_monday_start():
    assert generate(2024, 8, calendar.MONDAY).first_weekday_offset == 6
    assert generate(2024, 2, calendar.MONDAY).first_weekday_offset == 4


def test_weeks_pad_to_full_rows():
    grid = generate(2024, 2)
    weeks = grid.weeks()
    assert all(len(week) == 7 for week in weeks)
    assert weeks[0][:5] == [None] * 5
    assert weeks[0][5] == 1
    flat = [d for week in weeks for d in week if d is not None]
    assert flat == list(range(1, 32))


def test_date_of_maps_day_number_to_calendar_date():
    grid = generate(2024, 1)
    assert grid.date_of(29).isoformat() == "2024-02-29"


def test_out_of_range_month_wraps_instead_of_raising():
    grid = generate(2024, 12)
    assert (grid.year, grid.month) == (2025, 0)
    grid = generate(2024, -1)
    assert (grid.year, grid.month) == (2023, 11)


def test_out_of_range_year_is_clamped():
    assert generate(0, 0).year == 1
    assert generate(10000, 0).year == 9999


def test_shift_month_wraps_backwards_into_previous_year():
    assert shift_month(2024, 0, -1) == (2023, 11)


def test_shift_month_wraps_forwards_into_next_year():
    assert shift_month(2023, 11, 1) == (2024, 0)


def test_shift_month_large_deltas():
    assert shift_month(2024, 5, 13) == (2025, 6)
    assert shift_month(2024, 5, -18) == (2022, 11)
    assert shift_month(2024, 5, 0) == (2024, 5)
    assert shift_month(2024, 0, 24) == (2026, 0)


def test_weekday_initials_follow_first_weekday():
    assert weekday_initials(calendar.SUNDAY) == ["S", "M", "T", "W", "T", "F", "S"]
    assert weekday_initials(calendar.MONDAY) == ["M", "T", "W", "T", "F", "S", "S"]


def test_month_title():
    assert month_title(2024, 0) == "January 2024"
