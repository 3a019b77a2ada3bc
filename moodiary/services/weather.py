import asyncio
import json
import logging

import aiohttp

from moodiary.config import settings
from moodiary.services.entry_store import WeatherSnapshot
from moodiary.services.persistence import PersistenceAdapter
from moodiary.utils.constants import WEATHER_TIMEOUT

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

_session: aiohttp.ClientSession | None = None
_providers: dict[int, "WeatherProvider"] = {}


def _get_session() -> aiohttp.ClientSession:
    global _session
    if _session is None or _session.closed:
        _session = aiohttp.ClientSession()
    return _session


async def close_session() -> None:
    global _session
    if _session is not None and not _session.closed:
        await _session.close()
        _session = None


def parse_current_weather(data: dict) -> WeatherSnapshot | None:
    """Pull temperature and condition out of a current-weather payload."""
    try:
        temperature = data["main"]["temp"]
        condition = data["weather"][0]["main"]
    except (KeyError, IndexError, TypeError):
        logger.warning("Unexpected weather payload: %s", data)
        return None
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
        logger.warning("Weather payload has non-numeric temperature: %r", temperature)
        return None
    return WeatherSnapshot(temperature=temperature, condition=str(condition))


async def fetch_current_weather(
    latitude: float,
    longitude: float,
    api_key: str,
    units: str = "metric",
) -> WeatherSnapshot | None:
    params = {
        "lat": str(latitude),
        "lon": str(longitude),
        "appid": api_key,
        "units": units,
    }
    timeout = aiohttp.ClientTimeout(total=WEATHER_TIMEOUT)
    try:
        session = _get_session()
        async with session.get(OPENWEATHER_URL, params=params, timeout=timeout) as resp:
            if resp.status != 200:
                body = await resp.text()
                logger.warning("Weather API returned %s: %s", resp.status, body[:500])
                return None
            data = await resp.json()
    except asyncio.TimeoutError:
        logger.warning("Weather request timed out")
        return None
    except (aiohttp.ClientError, ValueError) as e:
        logger.warning("Weather request failed: %s", e)
        return None
    return parse_current_weather(data)


class WeatherProvider:
    """Latest weather for one user, fetched in the background.

    ``current_snapshot`` never waits: it answers None until a fetch has
    succeeded, and keeps answering None if none ever does.
    """

    def __init__(self, api_key: str | None, units: str = "metric") -> None:
        self._api_key = api_key
        self._units = units
        self._snapshot: WeatherSnapshot | None = None
        self._task: asyncio.Task | None = None

    def current_snapshot(self) -> WeatherSnapshot | None:
        return self._snapshot

    def request(self, latitude: float, longitude: float) -> None:
        if not self._api_key:
            logger.debug("No weather API key configured, weather stays pending")
            return
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.create_task(self._refresh(latitude, longitude))

    async def _refresh(self, latitude: float, longitude: float) -> None:
        snapshot = await fetch_current_weather(
            latitude, longitude, self._api_key, self._units
        )
        if snapshot is not None:
            self._snapshot = snapshot


def get_provider(user_id: int) -> WeatherProvider:
    provider = _providers.get(user_id)
    if provider is None:
        provider = WeatherProvider(settings.openweather_api_key, settings.weather_units)
        _providers[user_id] = provider
    return provider


def location_key(user_id: int) -> str:
    return f"user:{user_id}:location"


async def remember_location(
    persistence: PersistenceAdapter,
    user_id: int,
    latitude: float,
    longitude: float,
) -> None:
    blob = json.dumps({"latitude": latitude, "longitude": longitude})
    await persistence.save(location_key(user_id), blob)


async def load_location(
    persistence: PersistenceAdapter,
    user_id: int,
) -> tuple[float, float] | None:
    blob = await persistence.load(location_key(user_id))
    if not blob:
        return None
    try:
        data = json.loads(blob)
        return float(data["latitude"]), float(data["longitude"])
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("Discarding malformed location for user_id=%s: %s", user_id, e)
        return None


async def refresh_weather(persistence: PersistenceAdapter, user_id: int) -> WeatherProvider:
    """Start a background fetch for the user's saved location, if any."""
    provider = get_provider(user_id)
    location = await load_location(persistence, user_id)
    if location is not None:
        provider.request(*location)
    return provider
