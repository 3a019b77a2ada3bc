"""Per-user journal: gates, applies and persists mood entries.

The journal owns one user's ``EntryStore`` and calendar view. Everything the
bot shows (month grid, per-day moods, trend) is derived from the store on
demand.
"""

from __future__ import annotations

import calendar
import json
import logging
from dataclasses import dataclass
from datetime import date

from moodiary.services import calendar_grid
from moodiary.services.edit_window import is_editable
from moodiary.services.entry_store import EntryStore, MoodEntry, WeatherSnapshot
from moodiary.services.moods import is_known
from moodiary.services.persistence import PersistenceAdapter
from moodiary.services.trend import TrendSeries, project

logger = logging.getLogger(__name__)


def history_key(user_id: int) -> str:
    return f"user:{user_id}:mood_history"


def view_key(user_id: int) -> str:
    return f"user:{user_id}:calendar_view"


@dataclass
class CalendarViewState:
    year: int
    month: int
    selected_date: date

    @classmethod
    def for_today(cls, today: date) -> CalendarViewState:
        return cls(year=today.year, month=today.month - 1, selected_date=today)

    def serialize(self) -> str:
        return json.dumps({"year": self.year, "month": self.month})

    @classmethod
    def deserialize(cls, blob: str | None, today: date) -> CalendarViewState:
        """Restore the viewed month; the selection always starts at today."""
        view = cls.for_today(today)
        if not blob:
            return view
        try:
            data = json.loads(blob)
            year, month = data["year"], data["month"]
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in (year, month)):
                raise ValueError(f"year/month must be integers, got {year!r}/{month!r}")
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding malformed calendar view: %s", e)
            return view
        view.year, view.month = calendar_grid.shift_month(year, month, 0)
        return view


class Journal:
    def __init__(
        self,
        user_id: int,
        persistence: PersistenceAdapter,
        store: EntryStore | None = None,
        view: CalendarViewState | None = None,
        first_weekday: int = calendar.SUNDAY,
    ) -> None:
        self.user_id = user_id
        self.store = store if store is not None else EntryStore()
        self.view = view or CalendarViewState.for_today(date.today())
        self.first_weekday = first_weekday
        self._persistence = persistence

    @classmethod
    async def load(
        cls,
        persistence: PersistenceAdapter,
        user_id: int,
        today: date | None = None,
        first_weekday: int = calendar.SUNDAY,
    ) -> Journal:
        today = today or date.today()
        store = EntryStore.deserialize(await persistence.load(history_key(user_id)))
        view = CalendarViewState.deserialize(
            await persistence.load(view_key(user_id)), today
        )
        return cls(user_id, persistence, store, view, first_weekday)

    async def save_entry(
        self,
        day: date,
        mood: str,
        note: str,
        weather: WeatherSnapshot | None = None,
        today: date | None = None,
    ) -> bool:
        """Record ``mood`` and ``note`` for ``day``.

        Returns False without writing when the mood is not one of the known
        symbols, the note is blank or ``day`` is in the past.
        """
        if not is_known(mood):
            return False
        entry = MoodEntry.for_day(day, mood, note, weather)
        if not self.store.upsert(entry, today):
            return False
        logger.info("Saved mood for user_id=%s on %s", self.user_id, entry.date)
        await self._persistence.save(history_key(self.user_id), self.store.serialize())
        return True

    def select_date(self, day: date, today: date | None = None) -> bool:
        if not is_editable(day, today):
            return False
        self.view.selected_date = day
        return True

    async def change_month(self, delta: int) -> None:
        self.view.year, self.view.month = calendar_grid.shift_month(
            self.view.year, self.view.month, delta
        )
        await self._persistence.save(view_key(self.user_id), self.view.serialize())

    def grid(self) -> calendar_grid.MonthGrid:
        return calendar_grid.generate(self.view.year, self.view.month, self.first_weekday)

    def mood_for_day(self, day: int) -> str:
        """Mood recorded for ``day`` of the viewed month, "" if none."""
        try:
            return self.store.latest_mood_for(date(self.view.year, self.view.month + 1, day))
        except ValueError:
            return ""

    def entries(self) -> list[MoodEntry]:
        return self.store.all()

    def trend(self) -> TrendSeries:
        return project(self.store.all())
