import asyncio
import json
from datetime import timedelta

from moodiary.services.entry_store import WeatherSnapshot
from moodiary.services.journal import (
    CalendarViewState,
    Journal,
    history_key,
    view_key,
)
from moodiary.services.persistence import MemoryPersistence

HAPPY = "\U0001f60a"


def load(persistence, today, user_id=1):
    return asyncio.run(Journal.load(persistence, user_id, today=today))


def test_empty_persistence_starts_at_today(today):
    journal = load(MemoryPersistence(), today)
    assert len(journal.entries()) == 0
    assert (journal.view.year, journal.view.month) == (2024, 2)
    assert journal.view.selected_date == today


def test_save_then_trend(today):
    persistence = MemoryPersistence()
    journal = load(persistence, today)

    assert asyncio.run(journal.save_entry(today, HAPPY, "ok", today=today))

    series = journal.trend()
    assert series.labels == ["3/15/2024"]
    assert series.values == [4]
    assert json.loads(persistence.blobs[history_key(1)])[0]["note"] == "ok"


def test_save_for_yesterday_is_rejected(today):
    persistence = MemoryPersistence()
    journal = load(persistence, today)

    saved = asyncio.run(
        journal.save_entry(today - timedelta(days=1), HAPPY, "too late", today=today)
    )
    assert not saved
    assert journal.entries() == []
    assert history_key(1) not in persistence.blobs


def test_save_rejects_unknown_mood_symbol(today):
    journal = load(MemoryPersistence(), today)
    assert not asyncio.run(journal.save_entry(today, "meh", "note", today=today))
    assert journal.entries() == []


def test_save_without_weather_records_pending_snapshot(today):
    journal = load(MemoryPersistence(), today)
    asyncio.run(journal.save_entry(today, HAPPY, "ok", today=today))
    assert journal.store.get(today).weather == WeatherSnapshot(None, "")


def test_save_keeps_weather_snapshot(today):
    journal = load(MemoryPersistence(), today)
    weather = WeatherSnapshot(18.2, "Clouds")
    asyncio.run(journal.save_entry(today, HAPPY, "ok", weather, today=today))
    assert journal.store.get(today).weather == weather


def test_entries_survive_reload(today):
    persistence = MemoryPersistence()
    journal = load(persistence, today)
    asyncio.run(journal.save_entry(today, HAPPY, "ok", today=today))

    # A week later the entry is in the past but still loads
    reloaded = load(persistence, today + timedelta(days=7))
    assert reloaded.store == journal.store
    assert reloaded.store.latest_mood_for(today) == HAPPY


def test_journals_are_isolated_per_user(today):
    persistence = MemoryPersistence()
    asyncio.run(load(persistence, today, user_id=1).save_entry(today, HAPPY, "ok", today=today))
    assert load(persistence, today, user_id=2).entries() == []


def test_change_month_persists_view(today):
    persistence = MemoryPersistence()
    journal = load(persistence, today)

    asyncio.run(journal.change_month(-3))
    assert (journal.view.year, journal.view.month) == (2023, 11)
    assert json.loads(persistence.blobs[view_key(1)]) == {"year": 2023, "month": 11}

    reloaded = load(persistence, today)
    assert (reloaded.view.year, reloaded.view.month) == (2023, 11)
    assert reloaded.view.selected_date == today


def test_corrupt_view_falls_back_to_today(today):
    for blob in ("garbage", "{}", '{"year": "2024", "month": 1}', "[]"):
        persistence = MemoryPersistence({view_key(1): blob})
        journal = load(persistence, today)
        assert (journal.view.year, journal.view.month) == (2024, 2)


def test_corrupt_history_gives_empty_journal(today):
    persistence = MemoryPersistence({history_key(1): "{broken"})
    assert load(persistence, today).entries() == []


def test_select_date_only_accepts_editable_days(today):
    journal = load(MemoryPersistence(), today)
    assert not journal.select_date(today - timedelta(days=1), today)
    assert journal.view.selected_date == today
    assert journal.select_date(today + timedelta(days=3), today)
    assert journal.view.selected_date == today + timedelta(days=3)


def test_grid_and_mood_for_day(today):
    journal = load(MemoryPersistence(), today)
    asyncio.run(journal.save_entry(today, HAPPY, "ok", today=today))

    grid = journal.grid()
    assert grid.days_in_month == 31
    assert journal.mood_for_day(15) == HAPPY
    assert journal.mood_for_day(16) == ""
    assert journal.mood_for_day(32) == ""


def test_view_state_round_trip(today):
    view = CalendarViewState(2025, 7, today)
    restored = CalendarViewState.deserialize(view.serialize(), today)
    assert (restored.year, restored.month) == (2025, 7)
