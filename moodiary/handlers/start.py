from aiogram import Router
from aiogram.filters import CommandStart, Command
from aiogram.types import Message

from moodiary.utils.texts import WELCOME_MESSAGE, HELP_MESSAGE

router = Router()


@router.message(CommandStart())
async def cmd_start(message: Message) -> None:
    await message.answer(WELCOME_MESSAGE, parse_mode="HTML")


@router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await message.answer(HELP_MESSAGE, parse_mode="HTML")
