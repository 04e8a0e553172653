"""
Database fixtures for integration tests.

Each test gets its own SQLite file under pytest's ``tmp_path`` so tests
never share state and no server has to be running.

Usage:
    pytest_plugins = ["tests.shared.fixtures.database"]

    @pytest.mark.asyncio
    async def test_something(db_session):
        ...
"""

from pathlib import Path

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from booklend.infrastructure.persistence.sqlalchemy import Base


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    """Engine bound to a fresh database file with all tables created."""
    engine = create_async_engine(
        sqlite_url(tmp_path / "booklend-test.db"),
        echo=False,
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    """Session that is rolled back after the test."""
    async with session_maker() as session:
        yield session
        await session.rollback()
