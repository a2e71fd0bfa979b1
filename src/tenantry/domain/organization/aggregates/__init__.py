from tenantry.domain.organization.aggregates.organization import Organization

__all__ = ["Organization"]
