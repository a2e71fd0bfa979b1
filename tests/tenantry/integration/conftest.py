"""Fixtures for integration tests against an in-memory SQLite database."""

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    session_maker,
)
