"""Проверка полей анкеты, которые вводит пользователь"""
import re
from datetime import date, datetime

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MIN_AGE = 5
MAX_AGE = 120
MIN_CONTACT_LENGTH = 10

# Размеры колонок personal_details
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 100
MAX_CONTACT_LENGTH = 20


def is_valid_full_name(value: str) -> bool:
    return 0 < len(value.strip()) <= MAX_NAME_LENGTH


def is_valid_email(value: str) -> bool:
    value = value.strip()
    return len(value) <= MAX_EMAIL_LENGTH and bool(EMAIL_RE.match(value))


def is_valid_contact_number(value: str) -> bool:
    return MIN_CONTACT_LENGTH <= len(value.strip()) <= MAX_CONTACT_LENGTH


def exact_age(date_of_birth: date, today: date) -> int:
    """Полных лет (с учётом того, был ли уже день рождения)"""
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def parse_date_of_birth(value: str, today: date = None) -> date:
    """
    Разобрать дату рождения YYYY-MM-DD и проверить возраст.

    ValueError.args[0] - ключ текста ошибки для пользователя.
    """
    today = today or date.today()

    try:
        dob = datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError("invalid_date_of_birth") from None

    age = exact_age(dob, today)
    if age < MIN_AGE:
        raise ValueError("age_too_young")
    if age > MAX_AGE:
        raise ValueError("age_too_old")

    return dob
