"""User domain: identity, credentials and organization membership.

This domain handles:
- User aggregate (id, email, password hash, role, activity flags)
- Email and role value objects
- Login and registration failures
"""

from tenantry.domain.user.aggregates import User
from tenantry.domain.user.exceptions import (
    AccountDeactivatedError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
)
from tenantry.domain.user.repositories import UserRepository
from tenantry.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "AccountDeactivatedError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "InvalidEmailError",
    "User",
    "UserRepository",
    "UserRole",
]
