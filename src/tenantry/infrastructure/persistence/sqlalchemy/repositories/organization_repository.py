"""SQLAlchemy implementation of OrganizationRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenantry.domain.organization import Organization, OrganizationRepository
from tenantry.domain.shared.time import ensure_tz_aware
from tenantry.infrastructure.persistence.sqlalchemy.models import OrganizationModel

logger = logging.getLogger(__name__)


class OrganizationRepositorySQLAlchemy(OrganizationRepository):
    """SQLAlchemy implementation of the OrganizationRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, organization_id: UUID) -> Organization | None:
        model = await self._find_model_by_id(organization_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def save(self, organization: Organization) -> None:
        existing = await self._find_model_by_id(organization.id)

        if existing:
            self._update_model(existing, organization)
            logger.debug(
                "Updated organization: %s (%d members)",
                organization.id,
                len(organization.user_ids),
            )
        else:
            self._session.add(self._map_to_model(organization))
            logger.info(
                "Created organization: %s (name: %s)",
                organization.id,
                organization.name,
            )

        await self._session.flush()

    async def _find_model_by_id(self, organization_id: UUID) -> OrganizationModel | None:
        stmt = select(OrganizationModel).where(OrganizationModel.id == organization_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: OrganizationModel) -> Organization:
        return Organization.reconstitute(
            id=model.id,
            name=model.name,
            user_ids=[UUID(user_id) for user_id in model.user_ids],
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, organization: Organization) -> OrganizationModel:
        return OrganizationModel(
            id=organization.id,
            name=organization.name,
            user_ids=[str(user_id) for user_id in organization.user_ids],
            created_at=organization.created_at,
            updated_at=organization.updated_at,
        )

    def _update_model(
        self,
        model: OrganizationModel,
        organization: Organization,
    ) -> None:
        model.name = organization.name
        # Assign a new list so the JSON column is marked dirty
        model.user_ids = [str(user_id) for user_id in organization.user_ids]
        model.updated_at = organization.updated_at
