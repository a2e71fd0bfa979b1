"""SQLAlchemy implementation of SessionRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenantry.domain.session import AuthSession, SessionRepository
from tenantry.domain.shared.time import ensure_tz_aware
from tenantry.infrastructure.persistence.sqlalchemy.models import SessionModel

logger = logging.getLogger(__name__)


class SessionRepositorySQLAlchemy(SessionRepository):
    """SQLAlchemy implementation of the SessionRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, session_id: UUID) -> AuthSession | None:
        model = await self._find_model_by_id(session_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def list_for_user(self, user_id: UUID) -> list[AuthSession]:
        stmt = (
            select(SessionModel)
            .where(SessionModel.user_id == user_id)
            .order_by(SessionModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def save(self, auth_session: AuthSession) -> None:
        existing = await self._find_model_by_id(auth_session.id)

        if existing:
            existing.revoked = auth_session.revoked
            existing.expires_at = auth_session.expires_at
            logger.debug("Updated session: %s", auth_session.id)
        else:
            self._session.add(self._map_to_model(auth_session))
            logger.info(
                "Created session: %s (user: %s)",
                auth_session.id,
                auth_session.user_id,
            )

        await self._session.flush()

    async def _find_model_by_id(self, session_id: UUID) -> SessionModel | None:
        stmt = select(SessionModel).where(SessionModel.id == session_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: SessionModel) -> AuthSession:
        return AuthSession.reconstitute(
            id=model.id,
            user_id=model.user_id,
            access_token=model.access_token,
            refresh_token=model.refresh_token,
            expires_at=ensure_tz_aware(model.expires_at),
            revoked=model.revoked,
            created_at=ensure_tz_aware(model.created_at),
        )

    def _map_to_model(self, auth_session: AuthSession) -> SessionModel:
        return SessionModel(
            id=auth_session.id,
            user_id=auth_session.user_id,
            access_token=auth_session.access_token,
            refresh_token=auth_session.refresh_token,
            expires_at=auth_session.expires_at,
            revoked=auth_session.revoked,
            created_at=auth_session.created_at,
        )
