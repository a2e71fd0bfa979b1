"""Organization domain: tenants and their member lists."""

from tenantry.domain.organization.aggregates import Organization
from tenantry.domain.organization.repositories import OrganizationRepository

__all__ = [
    "Organization",
    "OrganizationRepository",
]
