import html

from moodiary.services.entry_store import MoodEntry
from moodiary.services.moods import label_for_rank
from moodiary.services.trend import TrendSeries
from moodiary.utils.constants import NOTES_PREVIEW_LIMIT, TREND_BAR_WIDTH
from moodiary.utils.formatting import format_temperature


def trend_summary(series: TrendSeries) -> str:
    if not len(series):
        return "No mood data available yet."

    ranked = [v for v in series.values if v > 0]
    lines = [f"📈 <b>Mood Trend</b> ({len(series)} entries)\n"]
    if ranked:
        avg = sum(ranked) / len(ranked)
        lines.append(f"Average: <b>{avg:.1f}</b> / {TREND_BAR_WIDTH}")
    lines.append(f"Trend: {_compute_trend(ranked)}\n")

    for label, value in zip(series.labels, series.values):
        lines.append(f"<code>{html.escape(label):>10}</code> {_rank_bar(value)} {label_for_rank(value)}")

    return "\n".join(lines)


def notes_listing(entries: list[MoodEntry], units: str = "metric") -> str:
    if not entries:
        return "No notes yet. Use /mood to write the first one."

    shown = entries[-NOTES_PREVIEW_LIMIT:]
    lines = ["📓 <b>All Notes</b>"]
    if len(shown) < len(entries):
        lines.append(f"<i>(last {len(shown)} of {len(entries)})</i>")
    for e in shown:
        lines.append("")
        lines.append(f"{html.escape(e.mood)} <code>{html.escape(e.date)}</code>")
        lines.append(html.escape(e.note))
        lines.append(f"🌡️ {format_temperature(e.weather, units)}")
    return "\n".join(lines)


def _compute_trend(values: list[int]) -> str:
    if len(values) < 2:
        return "not enough data"
    first_half = values[: len(values) // 2]
    second_half = values[len(values) // 2 :]
    diff = sum(second_half) / len(second_half) - sum(first_half) / len(first_half)
    if diff > 0.5:
        return "📈 improving"
    elif diff < -0.5:
        return "📉 declining"
    return "➡️ steady"


def _rank_bar(rank: int) -> str:
    filled = "█" * rank
    empty = "░" * (TREND_BAR_WIDTH - rank)
    return f"[{filled}{empty}]"
