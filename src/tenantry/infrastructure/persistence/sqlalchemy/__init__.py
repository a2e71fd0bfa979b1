"""SQLAlchemy implementation of identity persistence.

Provides:
- Base: Declarative base for all models
- Models for organizations, users and sessions
- Repository implementations and the UnitOfWork
- Engine/session helpers
"""

from tenantry.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)
from tenantry.infrastructure.persistence.sqlalchemy.models import (
    Base,
    OrganizationModel,
    SessionModel,
    UserModel,
)
from tenantry.infrastructure.persistence.sqlalchemy.repositories import (
    OrganizationRepositorySQLAlchemy,
    SessionRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from tenantry.infrastructure.persistence.sqlalchemy.unit_of_work import (
    UnitOfWorkSQLAlchemy,
)

__all__ = [
    "Base",
    "OrganizationModel",
    "OrganizationRepositorySQLAlchemy",
    "SessionModel",
    "SessionRepositorySQLAlchemy",
    "UnitOfWorkSQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
