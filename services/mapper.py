"""Преобразование анкеты в строки БД и обратно

Внутри анкета описывается набором фактов: FoodChoice (выбранное блюдо)
или StatementRating (оценка утверждения). В таблице options оба вида
хранятся одинаково, различаются только по имени атрибута. Кодирование
имён ("FavoriteFood:<блюдо>" / ключ утверждения) есть только в этом модуле.
"""
from datetime import datetime
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from models import Subject, Attribute
from utils.questions import FOOD_PREFIX, STATEMENTS, get_statement_by_key
from .schemas import SurveySubmission, SurveyResponse


class FoodChoice(NamedTuple):
    label: str


class StatementRating(NamedTuple):
    key: str
    value: int


Fact = Union[FoodChoice, StatementRating]


def submission_facts(submission: SurveySubmission) -> List[Fact]:
    """Факты анкеты: сначала блюда, затем ответы на утверждения"""
    facts: List[Fact] = [FoodChoice(food) for food in submission.favorite_foods]

    for statement in STATEMENTS:
        value = getattr(submission, statement.response_field)
        # Нет оценки - нет строки (не путать с нулём)
        if value is not None:
            facts.append(StatementRating(statement.key, value))

    return facts


def fact_to_attribute(fact: Fact) -> Attribute:
    if isinstance(fact, FoodChoice):
        return Attribute(name=f"{FOOD_PREFIX}{fact.label}", rating=None)
    return Attribute(name=fact.key, rating=fact.value)


def attribute_to_fact(attribute: Attribute) -> Optional[Fact]:
    """Разобрать строку options; неизвестные имена пропускаем"""
    name = attribute.name or ""

    if name.startswith(FOOD_PREFIX):
        return FoodChoice(name[len(FOOD_PREFIX):])

    if get_statement_by_key(name) and attribute.rating is not None:
        return StatementRating(name, attribute.rating)

    return None


def normalize(
    submission: SurveySubmission,
    now: Optional[datetime] = None
) -> Tuple[Subject, List[Attribute]]:
    """
    Разложить анкету на запись Subject и строки Attribute.

    subject_id у атрибутов не заполнен: его проставляет репозиторий
    после вставки Subject, в той же транзакции.
    """
    subject = Subject(
        full_name=submission.full_name,
        email=submission.email,
        date_of_birth=submission.date_of_birth,
        contact_number=submission.contact_number,
        submitted_at=now or datetime.now(),
    )
    attributes = [fact_to_attribute(fact) for fact in submission_facts(submission)]
    return subject, attributes


def reconstruct(subject: Subject, attributes: Iterable[Attribute]) -> SurveyResponse:
    """Собрать ответ из Subject и его атрибутов (порядок строк не важен)"""
    foods = []
    ratings = {}

    for attribute in attributes:
        fact = attribute_to_fact(attribute)
        if isinstance(fact, FoodChoice):
            foods.append(fact.label)
        elif isinstance(fact, StatementRating):
            # Дубликатов быть не должно (PK), но берём первый
            ratings.setdefault(fact.key, fact.value)

    return SurveyResponse(
        survey_id=subject.id,
        full_name=subject.full_name,
        email=subject.email,
        date_of_birth=subject.date_of_birth,
        contact_number=subject.contact_number,
        submitted_at=subject.submitted_at,
        favorite_foods=foods,
        **{s.response_field: ratings.get(s.key) for s in STATEMENTS},
    )
