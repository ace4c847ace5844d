"""Конфигурация бота"""
import os
from dotenv import load_dotenv

load_dotenv()

BOT_TOKEN = os.getenv("BOT_TOKEN")
ADMIN_IDS = [int(id.strip()) for id in os.getenv("ADMIN_IDS", "").split(",") if id.strip()]

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///data.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")
