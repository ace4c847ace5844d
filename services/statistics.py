"""Модуль статистики анкет"""
from collections import Counter
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from utils.questions import FOOD_PREFIX, STATEMENTS, TRACKED_FOODS
from .repository import SurveyRepository
from .schemas import SurveyStatistics


def round_one(value: float) -> float:
    """Округление до 0.1, половина - от нуля (2.25 -> 2.3)"""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def calendar_age(date_of_birth: date, today: date) -> int:
    """Возраст как разница годов, без учёта дня рождения"""
    return today.year - date_of_birth.year


class SurveyStatisticsCalculator:
    """Подсчёт статистики по всем анкетам"""

    def __init__(self, session: AsyncSession):
        self.repository = SurveyRepository(session)

    async def compute(self, today: Optional[date] = None) -> SurveyStatistics:
        total = await self.repository.count()

        if total == 0:
            return SurveyStatistics()

        today = today or date.today()

        stats = {"total_surveys": total}
        stats.update(await self._age_stats(today))
        stats.update(await self._food_percentages(total))
        stats.update(await self._rating_averages())

        return SurveyStatistics(**stats)

    async def _age_stats(self, today: date) -> Dict[str, float]:
        ages = [calendar_age(dob, today) for dob in await self.repository.list_birth_dates()]

        if not ages:
            return {}

        return {
            "average_age": round_one(sum(ages) / len(ages)),
            "oldest_age": max(ages),
            "youngest_age": min(ages),
        }

    async def _food_percentages(self, total: int) -> Dict[str, float]:
        food_rows = await self.repository.list_attributes(prefix=FOOD_PREFIX)
        counts = Counter(row.name for row in food_rows)

        return {
            food.statistics_field: round_one(counts[f"{FOOD_PREFIX}{food.label}"] / total * 100)
            for food in TRACKED_FOODS
        }

    async def _rating_averages(self) -> Dict[str, float]:
        averages = {}

        for statement in STATEMENTS:
            rows = await self.repository.list_attributes(name=statement.key)
            ratings = [row.rating for row in rows if row.rating is not None]
            averages[statement.statistics_field] = (
                round_one(sum(ratings) / len(ratings)) if ratings else 0.0
            )

        return averages


def generate_stats_text(stats: SurveyStatistics) -> str:
    """Сгенерировать текст статистики"""
    if stats.total_surveys == 0:
        return "📊 Survey statistics\n\nNo surveys submitted yet."

    text = "📊 Survey statistics\n\n"
    text += f"Total number of surveys: {stats.total_surveys}\n"
    text += f"Average age: {stats.average_age}\n"
    text += f"Oldest person who participated in survey: {stats.oldest_age}\n"
    text += f"Youngest person who participated in survey: {stats.youngest_age}\n\n"

    for food in TRACKED_FOODS:
        pct = getattr(stats, food.statistics_field)
        text += f"Percentage of people who like {food.label}: {pct} %\n"
    text += "\n"

    for statement in STATEMENTS:
        avg = getattr(stats, statement.statistics_field)
        text += f"{statement.text}: {avg} average of rating\n"

    return text
