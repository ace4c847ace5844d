"""Клавиатуры для опроса"""
from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from typing import List
from utils.questions import FOOD_OPTIONS, RATING_SCALE
from utils.texts import get_text


def get_food_keyboard(selected: List[str] = None) -> InlineKeyboardMarkup:
    """
    Клавиатура выбора блюд (мультивыбор с тогглами)

    selected: уже выбранные блюда
    """
    selected = selected or []
    buttons = []

    for idx, food in enumerate(FOOD_OPTIONS):
        prefix = "✅ " if food in selected else ""
        buttons.append([InlineKeyboardButton(
            text=f"{prefix}{food}",
            callback_data=f"food_{idx}"
        )])

    # Кнопка "Далее" только когда что-то выбрано
    if selected:
        buttons.append([InlineKeyboardButton(
            text=get_text("btn_next"),
            callback_data="foods_done"
        )])

    return InlineKeyboardMarkup(inline_keyboard=buttons)


def get_rating_keyboard(statement_key: str, can_skip: bool = True) -> InlineKeyboardMarkup:
    """Клавиатура оценки утверждения по шкале 1-5"""
    buttons = [
        [InlineKeyboardButton(
            text=f"{value} — {label}",
            callback_data=f"rate_{statement_key}_{value}"
        )]
        for value, label in RATING_SCALE.items()
    ]

    if can_skip:
        buttons.append([InlineKeyboardButton(
            text=get_text("btn_skip"),
            callback_data=f"skip_{statement_key}"
        )])

    return InlineKeyboardMarkup(inline_keyboard=buttons)
