"""
aiosqlite-based database fixtures for persistence tests.

Each test gets a fresh in-memory database with all gatehouse tables.

Usage:
    async def test_something(db_session):
        repo = SomeRepository(db_session)
        await repo.save(entity)
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gatehouse_auth.persistence.sqlalchemy import create_all, drop_all

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """
    Create an async engine on a private in-memory SQLite database.

    StaticPool keeps the single connection alive so every session sees
    the same in-memory database.
    """
    engine = create_async_engine(SQLITE_URL, poolclass=StaticPool)
    await create_all(engine)

    yield engine

    await drop_all(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    """Provide an isolated database session for each test."""
    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session
        await session.rollback()
