"""Общие фикстуры для тестов"""
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from models.database import Base, make_engine


@pytest.fixture
async def test_engine():
    """Тестовая БД в памяти"""
    engine = make_engine("sqlite+aiosqlite:///:memory:")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Создать тестовую сессию БД"""
    async_session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session_maker() as session:
        yield session
