from datetime import date

from aiogram import Router, F
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import Message, CallbackQuery, InlineKeyboardMarkup

from moodiary.keyboards.inline import NOOP, calendar_keyboard
from moodiary.middlewares.journal import remember_selected_date
from moodiary.services.journal import Journal
from moodiary.services.moods import rank_of, label_for_rank
from moodiary.utils.formatting import format_date_with_suffix
from moodiary.utils.texts import NO_ENTRY_FOR_DAY, READ_ONLY_DAY

router = Router()


def _calendar_view(journal: Journal) -> tuple[str, InlineKeyboardMarkup]:
    today = date.today()
    selected = journal.view.selected_date
    text = f"<b>{format_date_with_suffix(selected)}</b>\nPick a day, then use /mood."
    kb = calendar_keyboard(
        journal.grid(),
        journal.mood_for_day,
        selected,
        today,
        journal.first_weekday,
    )
    return text, kb


async def _redraw(callback: CallbackQuery, journal: Journal) -> None:
    text, kb = _calendar_view(journal)
    try:
        await callback.message.edit_text(text, reply_markup=kb, parse_mode="HTML")
    except TelegramBadRequest:
        # "message is not modified" when nothing visible changed
        pass


@router.message(Command("calendar"))
async def cmd_calendar(message: Message, journal: Journal) -> None:
    text, kb = _calendar_view(journal)
    await message.answer(text, reply_markup=kb, parse_mode="HTML")


@router.callback_query(F.data == NOOP)
async def calendar_noop(callback: CallbackQuery) -> None:
    await callback.answer()


@router.callback_query(F.data.startswith("cal:nav:"))
async def calendar_navigate(callback: CallbackQuery, journal: Journal) -> None:
    try:
        delta = int(callback.data.split(":")[2])
    except (ValueError, IndexError):
        await callback.answer("Invalid data.", show_alert=True)
        return

    await journal.change_month(delta)
    await _redraw(callback, journal)
    await callback.answer()


@router.callback_query(F.data.startswith("cal:day:"))
async def calendar_day_chosen(
    callback: CallbackQuery,
    journal: Journal,
    state: FSMContext,
) -> None:
    try:
        day = date.fromisoformat(callback.data.split(":", 2)[2])
    except (ValueError, IndexError):
        await callback.answer("Invalid data.", show_alert=True)
        return

    if not journal.select_date(day):
        # Past days stay viewable but never become the selection
        label = format_date_with_suffix(day)
        entry = journal.store.get(day)
        if entry is None:
            text = NO_ENTRY_FOR_DAY.format(day=label)
        else:
            text = f"{label_for_rank(rank_of(entry.mood))}\n{entry.note}"
        await callback.answer(
            f"{READ_ONLY_DAY.format(day=label)}\n\n{text}"[:200],
            show_alert=True,
        )
        return

    await remember_selected_date(journal, state)
    await _redraw(callback, journal)
    await callback.answer()
