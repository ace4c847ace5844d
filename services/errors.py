"""Ошибки сервиса анкет"""
from typing import List


class SurveyError(Exception):
    """Базовая ошибка сервиса анкет"""


class SurveyValidationError(SurveyError):
    """Анкета не прошла проверку"""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("; ".join(problems) or "invalid submission")


class SurveyStorageError(SurveyError):
    """Ошибка при работе с БД (транзакция уже откачена)"""
