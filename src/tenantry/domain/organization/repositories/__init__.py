from tenantry.domain.organization.repositories.organization_repository import (
    OrganizationRepository,
)

__all__ = ["OrganizationRepository"]
