from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from moodiary.services.entry_store import MoodEntry
from moodiary.services.moods import rank_of


@dataclass(frozen=True)
class TrendSeries:
    labels: list[str]
    values: list[int]

    def __len__(self) -> int:
        return len(self.values)


def project(entries: Iterable[MoodEntry]) -> TrendSeries:
    """Turn entries into a (label, rank) series in the order given.

    The series is not re-sorted by date: it follows write order, and unknown
    moods plot as 0.
    """
    labels: list[str] = []
    values: list[int] = []
    for entry in entries:
        labels.append(entry.date)
        values.append(rank_of(entry.mood))
    return TrendSeries(labels=labels, values=values)
