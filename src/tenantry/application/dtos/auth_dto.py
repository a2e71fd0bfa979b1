"""DTOs for registration and login."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from tenantry.domain.user import User
from tenantry_auth import TokenPair


@dataclass(frozen=True)
class RegisterCommand:
    """Input for registering a new account and its organization."""

    email: str
    password: str
    organization_name: str

    def __repr__(self) -> str:
        return (
            f"RegisterCommand(email={self.email!r}, "
            f"organization_name={self.organization_name!r})"
        )


@dataclass(frozen=True)
class LoginCommand:
    """Input for logging in with email and password."""

    email: str
    password: str

    def __repr__(self) -> str:
        return f"LoginCommand(email={self.email!r})"


@dataclass(frozen=True)
class UserDTO:
    """Outward view of a user. Carries no password hash."""

    id: UUID
    email: str
    role: str
    is_active: bool
    is_email_verified: bool
    organization_id: UUID
    project_ids: tuple[UUID, ...]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            is_email_verified=user.is_email_verified,
            organization_id=user.organization_id,
            project_ids=tuple(user.project_ids),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "email": self.email,
            "role": self.role,
            "is_active": self.is_active,
            "is_email_verified": self.is_email_verified,
            "organization_id": str(self.organization_id),
            "project_ids": [str(project_id) for project_id in self.project_ids],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class AuthResult:
    """Sanitized user plus the freshly issued token pair."""

    user: UserDTO
    tokens: TokenPair
