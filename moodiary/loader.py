from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage

from moodiary.config import settings
from moodiary.handlers import register_all_handlers
from moodiary.middlewares.journal import JournalMiddleware
from moodiary.services.persistence import SqlitePersistence


def create_bot() -> Bot:
    return Bot(
        token=settings.telegram_bot_token,
        default=DefaultBotProperties(parse_mode=None),
    )


def create_dispatcher() -> Dispatcher:
    persistence = SqlitePersistence(settings.db_path)
    # Handlers can ask for the adapter by name
    dp = Dispatcher(storage=MemoryStorage(), persistence=persistence)

    # The user's journal is loaded for every message and button press
    journal_middleware = JournalMiddleware(persistence)
    dp.message.middleware(journal_middleware)
    dp.callback_query.middleware(journal_middleware)

    register_all_handlers(dp)

    return dp
