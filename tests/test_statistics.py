"""Тесты для модуля статистики"""
import pytest
from datetime import date

from services.schemas import SurveyStatistics, SurveySubmission
from services.statistics import (
    SurveyStatisticsCalculator,
    calendar_age,
    generate_stats_text,
    round_one,
)
from services.survey import SurveyService

TODAY = date(2026, 6, 1)


async def add_survey(session, birth_year=1990, foods=("Pizza",), **ratings):
    submission = SurveySubmission(
        full_name="Test Person",
        email="test@example.com",
        date_of_birth=date(birth_year, 3, 15),
        contact_number="0820000000",
        favorite_foods=list(foods),
        **ratings,
    )
    ack = await SurveyService(session).submit_survey(submission)
    return ack.survey_id


@pytest.mark.asyncio
async def test_statistics_empty(test_session):
    """Тест: пустая БД даёт нулевую статистику без ошибки"""
    stats = await SurveyStatisticsCalculator(test_session).compute(TODAY)

    assert stats == SurveyStatistics()
    assert stats.total_surveys == 0
    assert stats.average_age == 0
    assert stats.pizza_percentage == 0
    assert stats.tv_average_rating == 0


@pytest.mark.asyncio
async def test_age_statistics(test_session):
    """Тест: возрасты 20, 30, 40"""
    for year in (2006, 1996, 1986):
        await add_survey(test_session, birth_year=year)

    stats = await SurveyStatisticsCalculator(test_session).compute(TODAY)

    assert stats.total_surveys == 3
    assert stats.average_age == 30.0
    assert stats.oldest_age == 40
    assert stats.youngest_age == 20


@pytest.mark.asyncio
async def test_food_percentages(test_session):
    """Тест: 2 из 4 выбрали пиццу"""
    await add_survey(test_session, foods=["Pizza", "Pasta"])
    await add_survey(test_session, foods=["Pizza"])
    await add_survey(test_session, foods=["Pap and Wors"])
    await add_survey(test_session, foods=["Sushi"])

    stats = await SurveyStatisticsCalculator(test_session).compute(TODAY)

    assert stats.pizza_percentage == 50.0
    assert stats.pasta_percentage == 25.0
    assert stats.pap_and_wors_percentage == 25.0


@pytest.mark.asyncio
async def test_food_percentage_rounding(test_session):
    """Тест: 1 из 3 - 33.3 %"""
    await add_survey(test_session, foods=["Pasta"])
    await add_survey(test_session, foods=["Pizza"])
    await add_survey(test_session, foods=["Pizza"])

    stats = await SurveyStatisticsCalculator(test_session).compute(TODAY)

    assert stats.pasta_percentage == 33.3
    assert stats.pizza_percentage == 66.7


@pytest.mark.asyncio
async def test_untracked_foods_not_reported(test_session):
    await add_survey(test_session, foods=["Sushi", "Other"])

    stats = await SurveyStatisticsCalculator(test_session).compute(TODAY)

    assert stats.total_surveys == 1
    assert stats.pizza_percentage == 0
    assert stats.pasta_percentage == 0
    assert stats.pap_and_wors_percentage == 0


@pytest.mark.asyncio
async def test_rating_averages(test_session):
    """Тест: оценки фильмов 4, 5, 3 - среднее 4.0, без оценок радио - 0"""
    await add_survey(test_session, movie_rating=4)
    await add_survey(test_session, movie_rating=5, tv_rating=2)
    await add_survey(test_session, movie_rating=3)

    stats = await SurveyStatisticsCalculator(test_session).compute(TODAY)

    assert stats.movie_average_rating == 4.0
    assert stats.tv_average_rating == 2.0
    assert stats.radio_average_rating == 0
    assert stats.eat_out_average_rating == 0


@pytest.mark.asyncio
async def test_rating_average_rounds_half_away_from_zero(test_session):
    """Тест: 1, 1, 1, 2 - среднее 1.25 округляется до 1.3"""
    for value in (1, 1, 1, 2):
        await add_survey(test_session, eat_out_rating=value)

    stats = await SurveyStatisticsCalculator(test_session).compute(TODAY)

    assert stats.eat_out_average_rating == 1.3


@pytest.mark.asyncio
async def test_service_statistics_defaults_to_today(test_session):
    await add_survey(test_session, birth_year=date.today().year - 25)

    stats = await SurveyService(test_session).get_statistics()

    assert stats.average_age == 25.0


def test_calendar_age_ignores_birthday():
    """Тест: возраст считается разницей годов"""
    assert calendar_age(date(2000, 12, 31), date(2026, 1, 1)) == 26
    assert calendar_age(date(2000, 1, 1), date(2026, 12, 31)) == 26


@pytest.mark.parametrize("value, expected", [
    (2.25, 2.3),
    (2.35, 2.4),
    (1.25, 1.3),
    (100 / 3, 33.3),
    (200 / 3, 66.7),
    (4.0, 4.0),
    (0, 0.0),
])
def test_round_one(value, expected):
    assert round_one(value) == expected


def test_generate_stats_text_empty():
    """Тест: генерация статистики для пустой БД"""
    assert "No surveys submitted yet" in generate_stats_text(SurveyStatistics())


def test_generate_stats_text():
    stats = SurveyStatistics(
        total_surveys=4,
        average_age=31.5,
        oldest_age=40,
        youngest_age=20,
        pizza_percentage=50.0,
        movie_average_rating=4.0,
    )

    text = generate_stats_text(stats)

    assert "Total number of surveys: 4" in text
    assert "Average age: 31.5" in text
    assert "Percentage of people who like Pizza: 50.0 %" in text
    assert "Percentage of people who like Pap and Wors: 0.0 %" in text
    assert "I like to watch movies: 4.0 average of rating" in text
