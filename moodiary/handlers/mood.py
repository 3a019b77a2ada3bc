import logging

from aiogram import Router, F
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.fsm.state import State, StatesGroup
from aiogram.types import Message, CallbackQuery

from moodiary.config import settings as app_settings
from moodiary.keyboards.inline import mood_keyboard
from moodiary.middlewares.journal import remember_selected_date, stored_selected_date
from moodiary.services.edit_window import is_editable
from moodiary.services.journal import Journal
from moodiary.services.moods import by_rank
from moodiary.services.persistence import PersistenceAdapter
from moodiary.services.weather import get_provider, refresh_weather
from moodiary.utils.formatting import format_date_with_suffix, format_temperature
from moodiary.utils.texts import (
    CANCELLED_MESSAGE,
    MOOD_PROMPT,
    NOTE_PROMPT,
    READ_ONLY_DAY,
    SAVED_MESSAGE,
)

logger = logging.getLogger(__name__)

router = Router()


class MoodStates(StatesGroup):
    waiting_note = State()


@router.message(Command("mood"))
async def cmd_mood(
    message: Message,
    journal: Journal,
    state: FSMContext,
    persistence: PersistenceAdapter,
) -> None:
    selected = journal.view.selected_date
    label = format_date_with_suffix(selected)
    if not is_editable(selected):
        await message.answer(READ_ONLY_DAY.format(day=label))
        return

    await remember_selected_date(journal, state)
    provider = await refresh_weather(persistence, message.from_user.id)
    temperature = format_temperature(provider.current_snapshot(), app_settings.weather_units)
    await message.answer(
        MOOD_PROMPT.format(day=label, temperature=temperature),
        reply_markup=mood_keyboard(journal.store.latest_mood_for(selected)),
    )


@router.callback_query(F.data.startswith("mood:"))
async def mood_chosen(callback: CallbackQuery, journal: Journal, state: FSMContext) -> None:
    try:
        rank = int(callback.data.split(":")[1])
    except (ValueError, IndexError):
        await callback.answer("Invalid data.", show_alert=True)
        return

    mood = by_rank(rank)
    if mood is None:
        await callback.answer("Unknown mood.", show_alert=True)
        return

    selected = journal.view.selected_date
    if not is_editable(selected):
        await callback.answer(
            READ_ONLY_DAY.format(day=format_date_with_suffix(selected)),
            show_alert=True,
        )
        return

    await state.update_data(mood=mood.symbol)
    await state.set_state(MoodStates.waiting_note)
    await callback.message.edit_text(
        NOTE_PROMPT.format(
            mood=f"{mood.symbol} {mood.label}",
            day=format_date_with_suffix(selected),
        ),
        reply_markup=mood_keyboard(mood.symbol),
    )
    await callback.answer()


@router.message(MoodStates.waiting_note, Command("cancel"))
async def mood_cancel(message: Message, state: FSMContext) -> None:
    await state.set_state(None)
    await state.update_data(mood=None)
    await message.answer(CANCELLED_MESSAGE)


@router.message(MoodStates.waiting_note, F.text, ~F.text.startswith("/"))
async def mood_note_received(
    message: Message,
    journal: Journal,
    state: FSMContext,
) -> None:
    data = await state.get_data()
    mood = data.get("mood") or ""
    # The draft belongs to the day picked with /mood, not to whatever today is now
    day = stored_selected_date(data) or journal.view.selected_date
    if not is_editable(day):
        logger.debug("Dropped draft for user_id=%s: %s has passed", message.from_user.id, day)
        await state.set_state(None)
        await state.update_data(mood=None)
        return

    weather = get_provider(message.from_user.id).current_snapshot()
    saved = await journal.save_entry(day, mood, message.text, weather)
    if not saved:
        # Blank note or unknown mood
        logger.debug("Ignored save for user_id=%s on %s", message.from_user.id, day)
        return

    await state.set_state(None)
    await state.update_data(mood=None)
    await message.answer(SAVED_MESSAGE)


@router.message(Command("cancel"))
async def cancel_without_draft(message: Message) -> None:
    await message.answer(CANCELLED_MESSAGE)
