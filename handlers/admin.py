"""Админские хендлеры"""
import os
import csv
import logging
from datetime import datetime
from aiogram import Router
from aiogram.types import Message, FSInputFile
from aiogram.filters import Command

from models import get_session
from services.errors import SurveyStorageError
from services.schemas import SurveyResponse
from services.statistics import generate_stats_text
from services.survey import SurveyService, CSV_FIELDNAMES
from utils.config import ADMIN_IDS, EXPORT_DIR
from utils.questions import STATEMENTS

router = Router()
logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096


def admin_only(func):
    """Декоратор для проверки прав администратора"""
    async def wrapper(message: Message, **kwargs):
        if message.from_user.id not in ADMIN_IDS:
            await message.answer("⛔️ This command is available to administrators only.")
            return
        try:
            return await func(message)
        except SurveyStorageError:
            logger.exception("Ошибка БД в команде %s", message.text)
            await message.answer("⚠️ An error occurred while reading surveys.")
    return wrapper


def parse_survey_id(message: Message):
    """Получить id анкеты из текста команды (/view 12)"""
    parts = (message.text or "").split()
    if len(parts) < 2 or not parts[1].isdigit():
        return None
    return int(parts[1])


def format_survey(survey: SurveyResponse) -> str:
    """Текст одной анкеты"""
    text = f"📝 Survey #{survey.survey_id}\n"
    text += f"Full name: {survey.full_name}\n"
    text += f"Email: {survey.email}\n"
    text += f"Date of birth: {survey.date_of_birth.isoformat()}\n"
    text += f"Contact: {survey.contact_number}\n"
    text += f"Submitted: {survey.submitted_at.strftime('%Y-%m-%d %H:%M')}\n"
    text += f"Favorite foods: {', '.join(survey.favorite_foods) or '—'}\n"

    for statement in STATEMENTS:
        value = getattr(survey, statement.response_field)
        text += f"{statement.text}: {value if value is not None else 'N/A'}\n"

    return text


async def answer_long(message: Message, text: str):
    """Отправить текст, разбивая на части по лимиту Telegram"""
    parts = [text[i:i + MAX_MESSAGE_LENGTH] for i in range(0, len(text), MAX_MESSAGE_LENGTH)]
    for part in parts:
        await message.answer(part)


@router.message(Command("stats"))
@admin_only
async def cmd_stats(message: Message):
    """Команда /stats - статистика"""
    async for session in get_session():
        stats = await SurveyService(session).get_statistics()
        await message.answer(generate_stats_text(stats))


@router.message(Command("surveys"))
@admin_only
async def cmd_surveys(message: Message):
    """Команда /surveys - все анкеты"""
    async for session in get_session():
        surveys = await SurveyService(session).get_all_surveys()

        if not surveys:
            await message.answer("No survey results found.")
            return

        text = "\n".join(format_survey(s) for s in surveys)
        await answer_long(message, text)


@router.message(Command("view"))
@admin_only
async def cmd_view(message: Message):
    """Команда /view <id> - одна анкета"""
    survey_id = parse_survey_id(message)
    if survey_id is None:
        await message.answer("Usage: /view <id>")
        return

    async for session in get_session():
        survey = await SurveyService(session).get_survey(survey_id)

        if survey is None:
            await message.answer(f"Survey with ID {survey_id} not found")
            return

        await message.answer(format_survey(survey))


@router.message(Command("delete"))
@admin_only
async def cmd_delete(message: Message):
    """Команда /delete <id> - удалить анкету"""
    survey_id = parse_survey_id(message)
    if survey_id is None:
        await message.answer("Usage: /delete <id>")
        return

    async for session in get_session():
        deleted = await SurveyService(session).delete_survey(survey_id)

        if not deleted:
            await message.answer(f"Survey with ID {survey_id} not found")
            return

        await message.answer(f"🗑 Survey #{survey_id} deleted.")


@router.message(Command("export"))
@admin_only
async def cmd_export(message: Message):
    """Команда /export - экспорт в CSV"""
    await message.answer("⏳ Preparing export...")

    async for session in get_session():
        data = await SurveyService(session).export_to_csv_data()

        if not data:
            await message.answer("No data to export.")
            return

        os.makedirs(EXPORT_DIR, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = os.path.join(EXPORT_DIR, f"surveys_{timestamp}.csv")

        with open(filename, 'w', newline='', encoding='utf-8-sig') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=CSV_FIELDNAMES)
            writer.writeheader()
            writer.writerows(data)

        document = FSInputFile(filename)
        await message.answer_document(
            document=document,
            caption=f"📊 Survey export ({len(data)} surveys)"
        )


@router.message(Command("admin"))
@admin_only
async def cmd_admin_help(message: Message):
    """Команда /admin - справка для админов"""
    help_text = """
🔧 Administrator commands

/stats — survey statistics
/surveys — all survey responses
/view <id> — one survey response
/delete <id> — delete a survey response
/export — export responses to CSV
"""
    await message.answer(help_text)
