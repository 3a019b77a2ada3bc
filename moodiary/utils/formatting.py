from datetime import date

from moodiary.services.entry_store import WeatherSnapshot

_UNIT_SUFFIX = {
    "metric": "°C",
    "imperial": "°F",
    "standard": " K",
}


def _day_suffix(day: int) -> str:
    if 3 < day < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_date_with_suffix(day: date) -> str:
    """19 October 2026 -> '19th October 2026'."""
    return f"{day.day}{_day_suffix(day.day)} {day.strftime('%B')} {day.year}"


def format_temperature(weather: WeatherSnapshot | None, units: str = "metric") -> str:
    if weather is None or weather.temperature is None:
        return "Loading..."
    return f"{weather.temperature}{_UNIT_SUFFIX.get(units, '°C')}"
