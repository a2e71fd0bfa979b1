"""
SQLite (aiosqlite) fixtures for integration tests.

Each test gets its own in-memory database, so there is nothing to clean
up between tests.

Usage:
    # In your conftest.py
    from tests.shared.fixtures.database import async_engine, db_session

    async def test_something(db_session):
        repo = SomeRepository(db_session)
        await repo.save(entity)
"""

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tenantry.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
)

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """
    Async engine bound to a fresh in-memory database with all tables.

    Foreign keys are switched on so SQLite enforces them like Postgres.
    """
    engine = create_engine(SQLITE_MEMORY_URL)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return create_session_maker(async_engine)


@pytest_asyncio.fixture
async def db_session(session_maker):
    """
    Provide a database session for a single test.

    Rolls back anything left uncommitted when the test ends.
    """
    async with session_maker() as session:
        yield session
        await session.rollback()
