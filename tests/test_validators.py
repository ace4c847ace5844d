"""Тесты проверки полей, которые вводит пользователь"""
import pytest
from datetime import date

from services.errors import SurveyValidationError
from services.survey import parse_submission
from utils.validators import (
    MAX_CONTACT_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    exact_age,
    is_valid_contact_number,
    is_valid_email,
    is_valid_full_name,
    parse_date_of_birth,
)

TODAY = date(2026, 6, 1)


def test_email():
    assert is_valid_email("thandi@example.com")
    assert is_valid_email("  a.b@mail.co.za ")
    assert not is_valid_email("thandi")
    assert not is_valid_email("thandi@example")
    assert not is_valid_email("")


def test_contact_number():
    assert is_valid_contact_number("0821234567")
    assert is_valid_contact_number("+27 82 123 4567")
    assert not is_valid_contact_number("082123")
    assert not is_valid_contact_number("+27 (0)82 000 0000 ext 12")


def test_full_name():
    assert is_valid_full_name("Thandi Mokoena")
    assert is_valid_full_name("a" * MAX_NAME_LENGTH)
    assert not is_valid_full_name("   ")
    assert not is_valid_full_name("a" * (MAX_NAME_LENGTH + 1))


def test_email_length():
    """Тест: адрес длиннее колонки отклоняется на своём шаге"""
    at_limit = "a" * (MAX_EMAIL_LENGTH - len("@example.com")) + "@example.com"
    assert is_valid_email(at_limit)
    assert not is_valid_email("a" + at_limit)


@pytest.mark.parametrize("field, value", [
    ("full_name", "a" * MAX_NAME_LENGTH),
    ("email", "a" * (MAX_EMAIL_LENGTH - len("@example.com")) + "@example.com"),
    ("contact_number", "0" * MAX_CONTACT_LENGTH),
])
def test_step_limits_match_submission(field, value):
    """Тест: значение, принятое на шаге бота, принимает и схема анкеты"""
    data = {
        "full_name": "Thandi Mokoena",
        "email": "thandi@example.com",
        "date_of_birth": "1990-05-17",
        "contact_number": "0821234567",
        "favorite_foods": ["Pizza"],
    }
    data[field] = value
    assert parse_submission(data)

    data[field] = value + "a"
    with pytest.raises(SurveyValidationError):
        parse_submission(data)


def test_exact_age_counts_birthday():
    assert exact_age(date(2000, 6, 2), TODAY) == 25
    assert exact_age(date(2000, 6, 1), TODAY) == 26


def test_parse_date_of_birth():
    assert parse_date_of_birth(" 1990-05-17 ", TODAY) == date(1990, 5, 17)


@pytest.mark.parametrize("value, error", [
    ("17/05/1990", "invalid_date_of_birth"),
    ("1990-02-30", "invalid_date_of_birth"),
    ("2022-01-01", "age_too_young"),
    ("1900-01-01", "age_too_old"),
])
def test_parse_date_of_birth_errors(value, error):
    with pytest.raises(ValueError) as exc_info:
        parse_date_of_birth(value, TODAY)

    assert exc_info.value.args[0] == error
