"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenantry.domain.shared.time import ensure_tz_aware
from tenantry.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from tenantry.infrastructure.persistence.sqlalchemy.models import UserModel
from tenantry.infrastructure.persistence.sqlalchemy.models.user_model import (
    EMAIL_UNIQUE_CONSTRAINT,
)

logger = logging.getLogger(__name__)


def _is_email_conflict(exc: IntegrityError) -> bool:
    # SQLite names the column, PostgreSQL names the constraint
    msg = str(getattr(exc, "orig", exc))
    return "users.email" in msg or EMAIL_UNIQUE_CONSTRAINT in msg


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_active_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(
            UserModel.id == user_id,
            UserModel.is_active.is_(True),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_obj = email if isinstance(email, Email) else Email.parse(email)
        if email_obj is None:
            return None

        stmt = select(UserModel).where(UserModel.email == email_obj.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            organization_id=model.organization_id,
            role=model.role,
            is_active=model.is_active,
            is_email_verified=model.is_email_verified,
            project_ids=[UUID(project_id) for project_id in model.project_ids],
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            is_active=user.is_active,
            is_email_verified=user.is_email_verified,
            organization_id=user.organization_id,
            project_ids=[str(project_id) for project_id in user.project_ids],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.password_hash = user.password_hash
        model.role = user.role.value
        model.is_active = user.is_active
        model.is_email_verified = user.is_email_verified
        model.organization_id = user.organization_id
        model.project_ids = [str(project_id) for project_id in user.project_ids]
        model.updated_at = user.updated_at
