import logging

from aiogram import Router, F
from aiogram.types import Message

from moodiary.services.persistence import PersistenceAdapter
from moodiary.services.weather import refresh_weather, remember_location
from moodiary.utils.texts import LOCATION_SAVED

logger = logging.getLogger(__name__)

router = Router()


@router.message(F.location)
async def location_shared(message: Message, persistence: PersistenceAdapter) -> None:
    user_id = message.from_user.id
    await remember_location(
        persistence,
        user_id,
        message.location.latitude,
        message.location.longitude,
    )
    await refresh_weather(persistence, user_id)
    logger.info("Location updated for user_id=%s", user_id)
    await message.answer(LOCATION_SAVED)
