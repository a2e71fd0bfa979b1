"""Data transfer objects for the application layer."""

from tenantry.application.dtos.auth_dto import (
    AuthResult,
    LoginCommand,
    RegisterCommand,
    UserDTO,
)

__all__ = [
    "AuthResult",
    "LoginCommand",
    "RegisterCommand",
    "UserDTO",
]
