"""Базовые хендлеры (команды /start, /help и т.д.)"""
from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from keyboards import get_main_menu_keyboard, get_back_to_menu_keyboard
from utils.texts import get_text

router = Router()


@router.message(Command("start"))
async def cmd_start(message: Message, state: FSMContext):
    """Команда /start"""
    await state.clear()

    await message.answer(
        get_text("start_welcome"),
        reply_markup=get_main_menu_keyboard()
    )


@router.callback_query(F.data == "main_menu")
async def show_main_menu(callback: CallbackQuery, state: FSMContext):
    """Показать главное меню"""
    await callback.answer()
    await state.clear()

    await callback.message.edit_text(
        get_text("main_menu"),
        reply_markup=get_main_menu_keyboard()
    )


@router.callback_query(F.data == "about_bot")
async def about_bot(callback: CallbackQuery):
    """О боте"""
    await callback.answer()

    await callback.message.edit_text(
        get_text("about_bot"),
        reply_markup=get_back_to_menu_keyboard()
    )


@router.message(Command("help"))
async def cmd_help(message: Message):
    """Команда /help"""
    await message.answer(get_text("help_text"))
