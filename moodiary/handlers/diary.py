from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from moodiary.config import settings as app_settings
from moodiary.services.journal import Journal
from moodiary.services.mood_analytics import notes_listing, trend_summary

router = Router()


@router.message(Command("diary"))
async def cmd_diary(message: Message, journal: Journal) -> None:
    await message.answer(trend_summary(journal.trend()), parse_mode="HTML")


@router.message(Command("notes"))
async def cmd_notes(message: Message, journal: Journal) -> None:
    text = notes_listing(journal.entries(), app_settings.weather_units)
    await message.answer(text, parse_mode="HTML")
