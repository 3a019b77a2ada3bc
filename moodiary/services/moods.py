from dataclasses import dataclass


@dataclass(frozen=True)
class Mood:
    symbol: str
    label: str
    rank: int


MOODS: tuple[Mood, ...] = (
    Mood("\U0001f621", "Angry", 1),
    Mood("\U0001f61e", "Sad", 2),
    Mood("\U0001f610", "Neutral", 3),
    Mood("\U0001f60a", "Happy", 4),
    Mood("\U0001f604", "Very Happy", 5),
)

NO_MOOD_LABEL = "No Mood"

_BY_SYMBOL = {m.symbol: m for m in MOODS}
_BY_RANK = {m.rank: m for m in MOODS}


def rank_of(symbol: str) -> int:
    """Ordinal rank 1-5 of a mood symbol, 0 if the symbol is unknown."""
    mood = _BY_SYMBOL.get(symbol)
    return mood.rank if mood else 0


def by_rank(rank: int) -> Mood | None:
    return _BY_RANK.get(rank)


def is_known(symbol: str) -> bool:
    return symbol in _BY_SYMBOL


def label_for_rank(rank: int) -> str:
    mood = _BY_RANK.get(rank)
    if mood is None:
        return NO_MOOD_LABEL
    return f"{mood.label} {mood.symbol}"
