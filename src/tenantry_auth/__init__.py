"""Tenantry Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the identity domain. It handles:
- Password hashing (bcrypt)
- JWT access/refresh token issuing and verification

Architecture:
    tenantry_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from tenantry_auth import PasswordHashingService, JWTService
"""

from tenantry_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    WeakPasswordError,
)
from tenantry_auth.schemas import TokenPair, TokenPayload
from tenantry_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "JWTService",
    "PasswordHashingService",
    # Schemas
    "TokenPair",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
