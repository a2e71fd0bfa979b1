"""Organization aggregate: the tenant that owns users."""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID, uuid4

from tenantry.domain.shared.exceptions import ValidationError
from tenantry.domain.shared.time import utc_now


class Organization:
    """
    Organization aggregate root.

    Keeps the ids of its member users. Users reference their organization
    by id as well, so both sides must be saved when membership changes.
    """

    MAX_NAME_LENGTH = 255

    def __init__(
        self,
        name: str,
        user_ids: Iterable[UUID] = (),
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._name = self._validate_name(name)
        self._id = id or uuid4()
        self._user_ids = list(user_ids)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def _validate_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            msg = "Organization name cannot be empty"
            raise ValidationError(msg)
        if len(cleaned) > Organization.MAX_NAME_LENGTH:
            msg = (
                "Organization name cannot exceed "
                f"{Organization.MAX_NAME_LENGTH} characters"
            )
            raise ValidationError(msg)
        return cleaned

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def user_ids(self) -> list[UUID]:
        return list(self._user_ids)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_member(self, user_id: UUID) -> bool:
        return user_id in self._user_ids

    def add_member(self, user_id: UUID) -> None:
        """Append a user to the member list (no-op if already a member)."""
        if user_id in self._user_ids:
            return
        self._user_ids.append(user_id)
        self._updated_at = utc_now()

    def rename(self, name: str) -> None:
        self._name = self._validate_name(name)
        self._updated_at = utc_now()

    @classmethod
    def create(cls, name: str) -> "Organization":
        return cls(name=name)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        user_ids: Iterable[UUID],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Organization":
        return cls(
            id=id,
            name=name,
            user_ids=user_ids,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Organization):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Organization(id={self._id}, name={self._name!r})"
