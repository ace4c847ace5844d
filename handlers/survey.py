"""Хендлеры опроса"""
import logging
from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from models import get_session
from keyboards import get_food_keyboard, get_rating_keyboard, get_back_to_menu_keyboard
from services.errors import SurveyStorageError, SurveyValidationError
from services.survey import SurveyService, parse_submission
from utils.texts import get_text
from utils.questions import (
    FOOD_OPTIONS,
    STATEMENTS,
    get_statement_by_key,
    get_next_statement,
    get_statement_number,
)
from utils.validators import (
    is_valid_full_name,
    is_valid_email,
    is_valid_contact_number,
    parse_date_of_birth,
)
from .states import SurveyFSM

router = Router()
logger = logging.getLogger(__name__)

# Личные данные + еда
PERSONAL_STEPS = 5


def progress(current: int) -> str:
    total = PERSONAL_STEPS + len(STATEMENTS)
    return f"📊 {get_text('progress', current=current, total=total)}\n\n"


async def start_questionnaire(message: Message, state: FSMContext):
    """Начать опрос с первого вопроса"""
    await state.clear()
    await state.set_state(SurveyFSM.full_name)
    await message.answer(progress(1) + get_text("ask_full_name"))


@router.callback_query(F.data == "start_survey")
async def start_survey(callback: CallbackQuery, state: FSMContext):
    """Начать опрос"""
    await callback.answer()
    await start_questionnaire(callback.message, state)


@router.message(Command("survey"))
async def cmd_survey(message: Message, state: FSMContext):
    """Команда начала опроса"""
    await start_questionnaire(message, state)


@router.message(Command("cancel"))
async def cmd_cancel(message: Message, state: FSMContext):
    """Отменить опрос"""
    if await state.get_state() is None:
        await message.answer(get_text("nothing_to_cancel"))
        return

    await state.clear()
    await message.answer(get_text("survey_cancelled"), reply_markup=get_back_to_menu_keyboard())


@router.message(SurveyFSM.full_name)
async def handle_full_name(message: Message, state: FSMContext):
    full_name = (message.text or "").strip()
    if not is_valid_full_name(full_name):
        await message.answer(get_text("invalid_full_name"))
        return

    await state.update_data(full_name=full_name)
    await state.set_state(SurveyFSM.email)
    await message.answer(progress(2) + get_text("ask_email"))


@router.message(SurveyFSM.email)
async def handle_email(message: Message, state: FSMContext):
    email = (message.text or "").strip()
    if not is_valid_email(email):
        await message.answer(get_text("invalid_email"))
        return

    await state.update_data(email=email)
    await state.set_state(SurveyFSM.date_of_birth)
    await message.answer(progress(3) + get_text("ask_date_of_birth"))


@router.message(SurveyFSM.date_of_birth)
async def handle_date_of_birth(message: Message, state: FSMContext):
    try:
        dob = parse_date_of_birth(message.text or "")
    except ValueError as e:
        await message.answer(get_text(e.args[0]))
        return

    # В FSM храним строкой, чтобы хранилище состояний могло её сериализовать
    await state.update_data(date_of_birth=dob.isoformat())
    await state.set_state(SurveyFSM.contact_number)
    await message.answer(progress(4) + get_text("ask_contact_number"))


@router.message(SurveyFSM.contact_number)
async def handle_contact_number(message: Message, state: FSMContext):
    contact_number = (message.text or "").strip()
    if not is_valid_contact_number(contact_number):
        await message.answer(get_text("invalid_contact_number"))
        return

    await state.update_data(contact_number=contact_number, favorite_foods=[])
    await state.set_state(SurveyFSM.favorite_foods)
    await message.answer(
        progress(5) + get_text("ask_foods"),
        reply_markup=get_food_keyboard()
    )


# Обработка множественного выбора (тогглы)
@router.callback_query(SurveyFSM.favorite_foods, F.data.startswith("food_"))
async def handle_food_toggle(callback: CallbackQuery, state: FSMContext):
    """Обработка тоггла в мультивыборе"""
    await callback.answer()

    idx = int(callback.data.replace("food_", ""))
    food = FOOD_OPTIONS[idx]

    user_data = await state.get_data()
    selected = user_data.get("favorite_foods", [])

    if food in selected:
        selected.remove(food)
    else:
        selected.append(food)

    await state.update_data(favorite_foods=selected)
    await callback.message.edit_reply_markup(reply_markup=get_food_keyboard(selected))


@router.callback_query(SurveyFSM.favorite_foods, F.data == "foods_done")
async def handle_foods_done(callback: CallbackQuery, state: FSMContext):
    """Завершение мультивыбора"""
    await callback.answer()

    user_data = await state.get_data()
    if not user_data.get("favorite_foods"):
        await callback.message.answer(get_text("no_food_selected"))
        return

    await state.update_data(ratings={})
    await state.set_state(SurveyFSM.statement_rating)
    await show_statement(callback.message, STATEMENTS[0].key, edit=True)


async def show_statement(message: Message, statement_key: str, edit: bool = False):
    """Показать утверждение для оценки"""
    statement = get_statement_by_key(statement_key)
    number = PERSONAL_STEPS + get_statement_number(statement_key)

    text = progress(number) + get_text("ask_statement", text=statement.text)
    keyboard = get_rating_keyboard(statement.key)

    if edit:
        await message.edit_text(text, reply_markup=keyboard)
    else:
        await message.answer(text, reply_markup=keyboard)


@router.callback_query(SurveyFSM.statement_rating, F.data.startswith("rate_"))
async def handle_rating(callback: CallbackQuery, state: FSMContext):
    """Оценка утверждения"""
    await callback.answer()

    _, statement_key, value = callback.data.split("_")
    statement = get_statement_by_key(statement_key)
    if statement is None:
        return

    user_data = await state.get_data()
    ratings = user_data.get("ratings", {})
    ratings[statement.response_field] = int(value)
    await state.update_data(ratings=ratings)

    await next_statement(callback.message, statement_key, state)


@router.callback_query(SurveyFSM.statement_rating, F.data.startswith("skip_"))
async def handle_skip(callback: CallbackQuery, state: FSMContext):
    """Пропустить утверждение (оценки не будет)"""
    await callback.answer()

    statement_key = callback.data.replace("skip_", "")
    if get_statement_by_key(statement_key) is None:
        return

    await next_statement(callback.message, statement_key, state)


async def next_statement(message: Message, current_key: str, state: FSMContext):
    statement = get_next_statement(current_key)
    if statement:
        await show_statement(message, statement.key, edit=True)
    else:
        await finish_survey(message, state)


async def finish_survey(message: Message, state: FSMContext):
    """Сохранение анкеты"""
    user_data = await state.get_data()
    await state.clear()

    data = {
        "full_name": user_data.get("full_name"),
        "email": user_data.get("email"),
        "date_of_birth": user_data.get("date_of_birth"),
        "contact_number": user_data.get("contact_number"),
        "favorite_foods": user_data.get("favorite_foods", []),
        **user_data.get("ratings", {}),
    }

    try:
        submission = parse_submission(data)
        async for session in get_session():
            ack = await SurveyService(session).submit_survey(submission)
    except SurveyValidationError as e:
        logger.warning("Анкета отклонена: %s", e)
        await message.answer(
            get_text("survey_invalid", problems="\n".join(e.problems)),
            reply_markup=get_back_to_menu_keyboard()
        )
        return
    except SurveyStorageError:
        logger.exception("Не удалось сохранить анкету")
        await message.answer(get_text("survey_failed"), reply_markup=get_back_to_menu_keyboard())
        return

    await message.answer(
        get_text("survey_submitted", survey_id=ack.survey_id),
        reply_markup=get_back_to_menu_keyboard()
    )
