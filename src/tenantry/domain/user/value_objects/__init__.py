"""Value objects for the user domain."""

from tenantry.domain.user.value_objects.email import Email
from tenantry.domain.user.value_objects.user_role import UserRole

__all__ = [
    "Email",
    "UserRole",
]
