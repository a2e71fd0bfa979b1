"""Unit tests for how UserRepositorySQLAlchemy classifies integrity errors."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from tenantry.domain.user import EmailAlreadyExistsError, User
from tenantry.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO users ...", {}, Exception(message))


class TestUserRepositoryConflicts:
    def setup_method(self):
        """Set up a session whose flush fails."""
        self.session = AsyncMock()
        self.session.add = Mock()
        result = Mock()
        result.scalar_one_or_none.return_value = None
        self.session.execute.return_value = result
        self.repo = UserRepositorySQLAlchemy(self.session)
        self.user = User.create_owner("owner@example.com", "hashed", uuid4())

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "message",
        [
            "UNIQUE constraint failed: users.email",
            'duplicate key value violates unique constraint "uq_users_email"',
        ],
    )
    async def test_email_constraint_becomes_conflict(self, message):
        self.session.flush.side_effect = _integrity_error(message)

        with pytest.raises(EmailAlreadyExistsError):
            await self.repo.save(self.user)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "message",
        [
            "UNIQUE constraint failed: users.id",
            'duplicate key value violates unique constraint "users_pkey"',
            "FOREIGN KEY constraint failed",
        ],
    )
    async def test_other_violations_propagate(self, message):
        self.session.flush.side_effect = _integrity_error(message)

        with pytest.raises(IntegrityError) as exc_info:
            await self.repo.save(self.user)

        assert not isinstance(exc_info.value, EmailAlreadyExistsError)
