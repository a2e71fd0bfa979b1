from enum import Enum


class UserRole(str, Enum):
    """Roles a user can hold inside their organization."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
