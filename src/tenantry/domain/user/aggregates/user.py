"""User aggregate: identity, credentials and organization membership."""

from collections.abc import Iterable
from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from tenantry.domain.shared.time import utc_now
from tenantry.domain.user.value_objects import Email, UserRole


class User:
    """
    User aggregate root.

    Every user belongs to exactly one organization. The password hash is
    held here so it can be verified at login, but it never leaves the
    application layer (see ``UserDTO``).
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        organization_id: UUID,
        role: Union[str, UserRole] = UserRole.MEMBER,
        is_active: bool = True,
        is_email_verified: bool = False,
        project_ids: Iterable[UUID] = (),
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._password_hash = password_hash
        self._organization_id = organization_id
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._is_active = is_active
        self._is_email_verified = is_email_verified
        self._project_ids = list(project_ids)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def organization_id(self) -> UUID:
        return self._organization_id

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_owner(self) -> bool:
        return self._role == UserRole.OWNER

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_email_verified(self) -> bool:
        return self._is_email_verified

    @property
    def project_ids(self) -> list[UUID]:
        return list(self._project_ids)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def touch(self) -> None:
        """Record activity on the account (e.g. a successful login)."""
        self._updated_at = utc_now()

    def deactivate(self) -> None:
        self._is_active = False
        self._updated_at = utc_now()

    def activate(self) -> None:
        self._is_active = True
        self._updated_at = utc_now()

    @classmethod
    def create_owner(
        cls,
        email: Union[str, Email],
        password_hash: str,
        organization_id: UUID,
    ) -> "User":
        """Create the founding user of a new organization."""
        return cls(
            email=email,
            password_hash=password_hash,
            organization_id=organization_id,
            role=UserRole.OWNER,
            is_active=True,
            is_email_verified=False,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        password_hash: str,
        organization_id: UUID,
        role: Union[str, UserRole],
        is_active: bool,
        is_email_verified: bool,
        project_ids: Iterable[UUID],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            organization_id=organization_id,
            role=role,
            is_active=is_active,
            is_email_verified=is_email_verified,
            project_ids=project_ids,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
