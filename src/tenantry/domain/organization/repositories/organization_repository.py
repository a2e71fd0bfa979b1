"""Organization repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from tenantry.domain.organization.aggregates.organization import Organization


class OrganizationRepository(ABC):
    """Repository interface for Organization aggregates."""

    @abstractmethod
    async def find_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Find an organization by its ID."""

    @abstractmethod
    async def save(self, organization: Organization) -> None:
        """Save or update an organization and flush it to the database."""
