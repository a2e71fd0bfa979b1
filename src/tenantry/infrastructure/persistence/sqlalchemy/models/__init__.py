"""SQLAlchemy models. Importing this package registers every table."""

from tenantry.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
    TimestampMixin,
)
from tenantry.infrastructure.persistence.sqlalchemy.models.organization_model import (
    OrganizationModel,
)
from tenantry.infrastructure.persistence.sqlalchemy.models.session_model import (
    SessionModel,
)
from tenantry.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "OrganizationModel",
    "SessionModel",
    "TimestampMixin",
    "UserModel",
]
