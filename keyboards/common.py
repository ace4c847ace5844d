"""Общие клавиатуры"""
from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from utils.texts import get_text


def get_main_menu_keyboard() -> InlineKeyboardMarkup:
    """Главное меню"""
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(
            text=get_text("btn_start_survey"),
            callback_data="start_survey"
        )],
        [InlineKeyboardButton(
            text=get_text("btn_about"),
            callback_data="about_bot"
        )]
    ])


def get_back_to_menu_keyboard() -> InlineKeyboardMarkup:
    """Кнопка возврата в главное меню"""
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(
            text=get_text("btn_main_menu"),
            callback_data="main_menu"
        )]
    ])
