"""SQLAlchemy repository implementations."""

from tenantry.infrastructure.persistence.sqlalchemy.repositories.organization_repository import (  # noqa: E501
    OrganizationRepositorySQLAlchemy,
)
from tenantry.infrastructure.persistence.sqlalchemy.repositories.session_repository import (  # noqa: E501
    SessionRepositorySQLAlchemy,
)
from tenantry.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "OrganizationRepositorySQLAlchemy",
    "SessionRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
