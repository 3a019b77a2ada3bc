from datetime import date
from typing import Any, Awaitable, Callable

from aiogram import BaseMiddleware
from aiogram.fsm.context import FSMContext
from aiogram.types import TelegramObject

from moodiary.config import settings
from moodiary.services.journal import Journal
from moodiary.services.persistence import PersistenceAdapter

SELECTED_DATE_KEY = "selected_date"


def stored_selected_date(data: dict[str, Any]) -> date | None:
    """The day the user picked, as kept in FSM data, even if it has passed."""
    raw = data.get(SELECTED_DATE_KEY)
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except (TypeError, ValueError):
        return None


async def restore_selected_date(journal: Journal, state: FSMContext | None) -> None:
    """Put the selection kept in FSM memory back on the journal view.

    A selection that has slipped into the past falls back to today.
    """
    if state is None:
        return
    selected = stored_selected_date(await state.get_data())
    if selected is not None:
        journal.select_date(selected)


async def remember_selected_date(journal: Journal, state: FSMContext) -> None:
    await state.update_data({SELECTED_DATE_KEY: journal.view.selected_date.isoformat()})


class JournalMiddleware(BaseMiddleware):
    def __init__(self, persistence: PersistenceAdapter) -> None:
        self._persistence = persistence

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        user = data.get("event_from_user")
        if user is None:
            return await handler(event, data)

        journal = await Journal.load(
            self._persistence,
            user.id,
            first_weekday=settings.first_weekday,
        )
        await restore_selected_date(journal, data.get("state"))
        data["journal"] = journal
        return await handler(event, data)
