from dataclasses import dataclass
import calendar
import os

from dotenv import load_dotenv

load_dotenv()

_WEEKDAYS = {
    "monday": calendar.MONDAY,
    "sunday": calendar.SUNDAY,
}


@dataclass(frozen=True)
class Settings:
    telegram_bot_token: str
    openweather_api_key: str | None = None
    db_path: str = "data/moodiary.db"
    weather_units: str = "metric"
    first_weekday: int = calendar.SUNDAY


def get_settings() -> Settings:
    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        raise ValueError("TELEGRAM_BOT_TOKEN is not set in .env")

    first_weekday = os.getenv("FIRST_WEEKDAY", "sunday").strip().lower()
    if first_weekday not in _WEEKDAYS:
        raise ValueError("FIRST_WEEKDAY must be 'sunday' or 'monday'")

    return Settings(
        telegram_bot_token=token,
        openweather_api_key=os.getenv("OPENWEATHER_API_KEY") or None,
        db_path=os.getenv("MOODIARY_DB_PATH", "data/moodiary.db"),
        weather_units=os.getenv("WEATHER_UNITS", "metric"),
        first_weekday=_WEEKDAYS[first_weekday],
    )


settings = get_settings()
