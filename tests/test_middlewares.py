import asyncio
from datetime import date, timedelta

from moodiary.middlewares.journal import (
    SELECTED_DATE_KEY,
    remember_selected_date,
    restore_selected_date,
    stored_selected_date,
)
from moodiary.services.journal import Journal
from moodiary.services.persistence import MemoryPersistence

HAPPY = "\U0001f60a"
SAD = "\U0001f61e"


class FakeState:
    def __init__(self, data=None):
        self.data = dict(data or {})

    async def get_data(self):
        return dict(self.data)

    async def update_data(self, data=None, **kwargs):
        self.data.update(data or {}, **kwargs)
        return dict(self.data)


def test_stored_selected_date():
    assert stored_selected_date({SELECTED_DATE_KEY: "2024-03-15"}) == date(2024, 3, 15)
    assert stored_selected_date({}) is None
    assert stored_selected_date({SELECTED_DATE_KEY: "15/03/2024"}) is None
    assert stored_selected_date({SELECTED_DATE_KEY: 20240315}) is None


def test_selection_round_trips_through_state():
    tomorrow = date.today() + timedelta(days=1)
    journal = Journal(1, MemoryPersistence())
    journal.select_date(tomorrow)
    state = FakeState()
    asyncio.run(remember_selected_date(journal, state))

    restored = Journal(1, MemoryPersistence())
    asyncio.run(restore_selected_date(restored, state))
    assert restored.view.selected_date == tomorrow


def test_restore_ignores_a_day_that_has_passed():
    yesterday = date.today() - timedelta(days=1)
    journal = Journal(1, MemoryPersistence())
    asyncio.run(restore_selected_date(journal, FakeState({SELECTED_DATE_KEY: yesterday.isoformat()})))
    assert journal.view.selected_date == date.today()


def test_note_for_a_passed_day_does_not_land_on_today():
    today = date.today()
    yesterday = today - timedelta(days=1)
    journal = Journal(1, MemoryPersistence())
    # Written ahead of time, while today was still in the future
    assert asyncio.run(journal.save_entry(today, HAPPY, "planned entry", today=yesterday))

    # The draft was started yesterday and the note arrives after midnight
    state = FakeState({SELECTED_DATE_KEY: yesterday.isoformat(), "mood": SAD})
    asyncio.run(restore_selected_date(journal, state))
    day = stored_selected_date(state.data)

    assert day == yesterday
    assert not asyncio.run(journal.save_entry(day, SAD, "late note"))
    assert len(journal.entries()) == 1
    assert journal.store.get(today).note == "planned entry"
    assert journal.store.get(yesterday) is None
