import asyncio
import logging

from aiogram.types import BotCommand

from moodiary.db.engine import init_db
from moodiary.loader import create_bot, create_dispatcher
from moodiary.services.weather import close_session


async def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)

    logger.info("Initializing database...")
    await init_db()

    bot = create_bot()
    dp = create_dispatcher()

    try:
        await bot.set_my_commands([
            BotCommand(command="start", description="Start"),
            BotCommand(command="help", description="List commands"),
            BotCommand(command="calendar", description="Browse months and pick a day"),
            BotCommand(command="mood", description="Record a mood for the selected day"),
            BotCommand(command="diary", description="Mood trend"),
            BotCommand(command="notes", description="All notes"),
            BotCommand(command="cancel", description="Discard the current entry"),
        ])
        logger.info("Bot commands menu set.")
    except Exception:
        logger.warning("Failed to set bot commands menu, continuing anyway.", exc_info=True)

    logger.info("Starting Moodiary bot...")
    try:
        await dp.start_polling(bot)
    finally:
        await close_session()
        await bot.session.close()


if __name__ == "__main__":
    asyncio.run(main())
