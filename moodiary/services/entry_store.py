from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Iterator

from moodiary.services.days import as_day, day_key, parse_day_key
from moodiary.services.edit_window import is_editable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature: float | None = None
    condition: str = ""

    @classmethod
    def pending(cls) -> WeatherSnapshot:
        return cls()

    def to_dict(self) -> dict:
        return {"temperature": self.temperature, "condition": self.condition}

    @classmethod
    def from_dict(cls, data: dict | None) -> WeatherSnapshot:
        if data is None:
            return cls.pending()
        if not isinstance(data, dict):
            raise ValueError(f"weather must be an object, got {type(data).__name__}")
        # Older blobs used "temp"
        temperature = data.get("temperature", data.get("temp"))
        if temperature is not None and (
            isinstance(temperature, bool) or not isinstance(temperature, (int, float))
        ):
            raise ValueError(f"temperature must be a number, got {temperature!r}")
        condition = data.get("condition") or ""
        if not isinstance(condition, str):
            raise ValueError(f"condition must be a string, got {condition!r}")
        return cls(temperature=temperature, condition=condition)


@dataclass(frozen=True)
class MoodEntry:
    date: str
    mood: str
    note: str
    weather: WeatherSnapshot = field(default_factory=WeatherSnapshot.pending)

    def __post_init__(self) -> None:
        # "03/15/2024" and "3/15/2024" are the same day and must share a key
        parsed = parse_day_key(self.date) if isinstance(self.date, str) else None
        if parsed is not None:
            object.__setattr__(self, "date", day_key(parsed))

    @classmethod
    def for_day(
        cls,
        day: date,
        mood: str,
        note: str,
        weather: WeatherSnapshot | None = None,
    ) -> MoodEntry:
        return cls(
            date=day_key(day),
            mood=mood,
            note=note,
            weather=weather or WeatherSnapshot.pending(),
        )

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "mood": self.mood,
            "note": self.note,
            "weather": self.weather.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> MoodEntry:
        if not isinstance(data, dict):
            raise ValueError(f"entry must be an object, got {type(data).__name__}")
        values = {}
        for name in ("date", "mood", "note"):
            value = data[name]
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
            values[name] = value
        return cls(weather=WeatherSnapshot.from_dict(data.get("weather")), **values)


class EntryStore:
    """Mood entries keyed by day, kept in write order.

    Replacing an entry keeps the slot of the first write for that day, so
    ``all()`` reflects when a day was first recorded, not when it last changed.
    """

    def __init__(self, entries: Iterable[MoodEntry] = ()) -> None:
        self._entries: list[MoodEntry] = []
        self._index: dict[str, int] = {}
        for entry in entries:
            self._put(entry)

    def _put(self, entry: MoodEntry) -> None:
        slot = self._index.get(entry.date)
        if slot is None:
            self._index[entry.date] = len(self._entries)
            self._entries.append(entry)
        else:
            self._entries[slot] = entry

    def upsert(self, entry: MoodEntry, today: date | None = None) -> bool:
        """Write ``entry`` if it has a mood, a note and an editable day.

        Returns False and leaves the store untouched otherwise.
        """
        # A whitespace-only note counts as empty
        if not entry.mood or not entry.note.strip():
            return False
        if not is_editable(entry.date, today):
            return False
        self._put(entry)
        return True

    def get(self, day: date | str) -> MoodEntry | None:
        key = _key_for(day)
        if key is None:
            return None
        slot = self._index.get(key)
        return self._entries[slot] if slot is not None else None

    def latest_mood_for(self, day: date | str) -> str:
        entry = self.get(day)
        return entry.mood if entry else ""

    def all(self) -> list[MoodEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MoodEntry]:
        return iter(list(self._entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntryStore):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"EntryStore({self._entries!r})"

    def serialize(self) -> str:
        return json.dumps([e.to_dict() for e in self._entries], ensure_ascii=False)

    @classmethod
    def deserialize(cls, blob: str | bytes | None) -> EntryStore:
        """Rebuild a store from ``serialize`` output.

        Missing, empty or malformed blobs give an empty store. Entries load
        regardless of the edit window.
        """
        if not blob:
            return cls()
        try:
            raw = json.loads(blob)
            if not isinstance(raw, list):
                raise ValueError(f"expected a list, got {type(raw).__name__}")
            entries = [MoodEntry.from_dict(item) for item in raw]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding malformed mood history: %s", e)
            return cls()
        return cls(entries)


def _key_for(day: date | str) -> str | None:
    if isinstance(day, str):
        parsed = parse_day_key(day)
        return day_key(parsed) if parsed else day
    parsed = as_day(day)
    return day_key(parsed) if parsed else None
