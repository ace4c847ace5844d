"""Сервис анкет: приём, чтение, статистика, экспорт"""
import logging
from datetime import date
from typing import Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from utils.questions import STATEMENTS
from .errors import SurveyValidationError
from .mapper import normalize, reconstruct
from .repository import SurveyRepository
from .schemas import SubmissionAck, SurveyResponse, SurveyStatistics, SurveySubmission
from .statistics import SurveyStatisticsCalculator

logger = logging.getLogger(__name__)

CSV_FIELDNAMES = [
    "survey_id",
    "full_name",
    "email",
    "date_of_birth",
    "contact_number",
    "submitted_at",
    "favorite_foods",
] + [s.response_field for s in STATEMENTS]


def parse_submission(data: Dict) -> SurveySubmission:
    """Проверить сырые данные анкеты"""
    try:
        return SurveySubmission.model_validate(data)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise SurveyValidationError(problems) from e


class SurveyService:
    """Операции над анкетами в рамках одной сессии БД"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = SurveyRepository(session)

    async def submit_survey(self, submission: SurveySubmission) -> SubmissionAck:
        subject, attributes = normalize(submission)
        survey_id = await self.repository.create(subject, attributes)

        logger.info("Анкета %s сохранена (%s атрибутов)", survey_id, len(attributes))
        return SubmissionAck(survey_id=survey_id)

    async def get_survey(self, survey_id: int) -> Optional[SurveyResponse]:
        subject = await self.repository.get(survey_id)
        if subject is None:
            return None
        return reconstruct(subject, subject.attributes)

    async def get_all_surveys(self) -> List[SurveyResponse]:
        subjects = await self.repository.list_all()
        return [reconstruct(s, s.attributes) for s in subjects]

    async def get_statistics(self, today: Optional[date] = None) -> SurveyStatistics:
        return await SurveyStatisticsCalculator(self.session).compute(today)

    async def delete_survey(self, survey_id: int) -> bool:
        deleted = await self.repository.delete(survey_id)
        if deleted:
            logger.info("Анкета %s удалена", survey_id)
        return deleted

    async def export_to_csv_data(self) -> List[Dict]:
        """Подготовить данные для экспорта в CSV"""
        csv_data = []

        for survey in await self.get_all_surveys():
            row = {
                "survey_id": survey.survey_id,
                "full_name": survey.full_name,
                "email": survey.email,
                "date_of_birth": survey.date_of_birth.isoformat(),
                "contact_number": survey.contact_number,
                "submitted_at": survey.submitted_at.strftime("%Y-%m-%d %H:%M:%S"),
                "favorite_foods": ", ".join(survey.favorite_foods),
            }

            # Неотвеченные утверждения - пустая ячейка
            for statement in STATEMENTS:
                value = getattr(survey, statement.response_field)
                row[statement.response_field] = "" if value is None else value

            csv_data.append(row)

        return csv_data
