"""Доступ к таблицам анкет"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models import Subject, Attribute
from .errors import SurveyStorageError

logger = logging.getLogger(__name__)


class SurveyRepository:
    """Хранилище анкет поверх AsyncSession"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, subject: Subject, attributes: List[Attribute]) -> int:
        """Сохранить анкету и её атрибуты одной транзакцией, вернуть id"""
        try:
            self.session.add(subject)
            await self.session.flush()

            subject_id = subject.id
            for attribute in attributes:
                attribute.subject_id = subject_id

            if attributes:
                self.session.add_all(attributes)
                await self.session.flush()

            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Не удалось сохранить анкету: %s", e)
            raise SurveyStorageError("failed to save survey") from e

        return subject_id

    async def get(self, subject_id: int) -> Optional[Subject]:
        """Анкета с атрибутами или None"""
        query = (
            select(Subject)
            .options(selectinload(Subject.attributes))
            .where(Subject.id == subject_id)
            .execution_options(populate_existing=True)
        )
        result = await self._execute(query)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Subject]:
        """Все анкеты с атрибутами"""
        query = (
            select(Subject)
            .options(selectinload(Subject.attributes))
            .order_by(Subject.id)
            .execution_options(populate_existing=True)
        )
        result = await self._execute(query)
        return list(result.scalars().all())

    async def list_attributes(
        self, prefix: Optional[str] = None, name: Optional[str] = None
    ) -> List[Attribute]:
        """Атрибуты всех анкет, с фильтром по префиксу или точному имени"""
        query = select(Attribute)

        if prefix:
            query = query.where(Attribute.name.startswith(prefix, autoescape=True))

        if name:
            query = query.where(Attribute.name == name)

        result = await self._execute(query)
        return list(result.scalars().all())

    async def list_birth_dates(self) -> List[date]:
        result = await self._execute(select(Subject.date_of_birth))
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self._execute(select(func.count(Subject.id)))
        return result.scalar() or 0

    async def delete(self, subject_id: int) -> bool:
        """Удалить анкету (атрибуты удаляются каскадом)"""
        subject = await self.get(subject_id)
        if subject is None:
            return False

        try:
            await self.session.delete(subject)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Не удалось удалить анкету %s: %s", subject_id, e)
            raise SurveyStorageError(f"failed to delete survey {subject_id}") from e

        return True

    async def _execute(self, query):
        try:
            return await self.session.execute(query)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Ошибка запроса к БД: %s", e)
            raise SurveyStorageError("storage query failed") from e
