"""Login session issued alongside a token pair."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from tenantry.domain.shared.time import utc_now


class AuthSession:
    """
    Record of a token pair handed to a user.

    Sessions are written when an account is registered. ``revoked`` starts
    out False; nothing flips it yet.
    """

    DEFAULT_TTL = timedelta(days=7)

    def __init__(  # noqa: PLR0913
        self,
        user_id: UUID,
        access_token: str,
        refresh_token: str,
        expires_at: datetime,
        revoked: bool = False,
        id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._access_token = access_token
        self._refresh_token = refresh_token
        self._expires_at = expires_at
        self._revoked = revoked
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def refresh_token(self) -> str:
        return self._refresh_token

    @property
    def expires_at(self) -> datetime:
        return self._expires_at

    @property
    def revoked(self) -> bool:
        return self._revoked

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utc_now()) >= self._expires_at

    def is_valid(self, now: datetime | None = None) -> bool:
        return not self._revoked and not self.is_expired(now)

    def revoke(self) -> None:
        self._revoked = True

    @classmethod
    def start(
        cls,
        user_id: UUID,
        access_token: str,
        refresh_token: str,
        ttl: timedelta = DEFAULT_TTL,
    ) -> "AuthSession":
        """Open a new session that expires ``ttl`` from now."""
        now = utc_now()
        return cls(
            user_id=user_id,
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=now + ttl,
            revoked=False,
            created_at=now,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        access_token: str,
        refresh_token: str,
        expires_at: datetime,
        revoked: bool,
        created_at: datetime,
    ) -> "AuthSession":
        return cls(
            id=id,
            user_id=user_id,
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=expires_at,
            revoked=revoked,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthSession):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"AuthSession(id={self._id}, user_id={self._user_id}, "
            f"revoked={self._revoked})"
        )
