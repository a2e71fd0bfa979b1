"""Pure auth services: password hashing and JWT handling."""

from tenantry_auth.services.jwt_service import JWTService
from tenantry_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
