"""Session repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from tenantry.domain.session.entities.auth_session import AuthSession


class SessionRepository(ABC):
    """Repository interface for AuthSession entities."""

    @abstractmethod
    async def find_by_id(self, session_id: UUID) -> Optional[AuthSession]:
        """Find a session by its ID."""

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> list[AuthSession]:
        """List a user's sessions, oldest first."""

    @abstractmethod
    async def save(self, auth_session: AuthSession) -> None:
        """Save or update a session and flush it to the database."""
