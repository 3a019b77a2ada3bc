from aiogram import Dispatcher

from moodiary.handlers import start, calendar, mood, diary, location


def register_all_handlers(dp: Dispatcher) -> None:
    dp.include_router(start.router)
    dp.include_router(calendar.router)
    dp.include_router(mood.router)
    dp.include_router(diary.router)
    dp.include_router(location.router)
