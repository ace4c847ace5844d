"""Схемы анкеты: входящая анкета, ответ и статистика"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from utils.questions import MIN_RATING, MAX_RATING
from utils.validators import MAX_NAME_LENGTH, MAX_EMAIL_LENGTH, MAX_CONTACT_LENGTH

Rating = Optional[int]


class SurveySubmission(BaseModel):
    """Анкета от транспорта (бот, API)"""
    full_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    email: str = Field(min_length=1, max_length=MAX_EMAIL_LENGTH)
    date_of_birth: date
    contact_number: str = Field(min_length=1, max_length=MAX_CONTACT_LENGTH)

    favorite_foods: List[str] = Field(default_factory=list)

    # Оценки утверждений, None = не отвечено
    movie_rating: Rating = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    radio_rating: Rating = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    eat_out_rating: Rating = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    tv_rating: Rating = Field(default=None, ge=MIN_RATING, le=MAX_RATING)

    @field_validator("full_name", "email", "contact_number", mode="before")
    @classmethod
    def strip_text(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("favorite_foods")
    @classmethod
    def unique_foods(cls, value: List[str]) -> List[str]:
        # Набор чекбоксов: без пустых строк и повторов, порядок сохраняем
        foods = []
        for food in value:
            food = food.strip()
            if food and food not in foods:
                foods.append(food)
        return foods


class SurveyResponse(BaseModel):
    """Анкета, восстановленная из БД"""
    survey_id: Optional[int] = None  # None, пока анкета не сохранена
    full_name: str
    email: str
    date_of_birth: date
    contact_number: str
    submitted_at: datetime

    favorite_foods: List[str] = Field(default_factory=list)
    movie_rating: Rating = None
    radio_rating: Rating = None
    eat_out_rating: Rating = None
    tv_rating: Rating = None


class SurveyStatistics(BaseModel):
    """Сводная статистика по всем анкетам"""
    total_surveys: int = 0
    average_age: float = 0.0
    oldest_age: int = 0
    youngest_age: int = 0

    pizza_percentage: float = 0.0
    pasta_percentage: float = 0.0
    pap_and_wors_percentage: float = 0.0

    movie_average_rating: float = 0.0
    radio_average_rating: float = 0.0
    eat_out_average_rating: float = 0.0
    tv_average_rating: float = 0.0


class SubmissionAck(BaseModel):
    survey_id: int
    message: str = "Survey submitted successfully"
