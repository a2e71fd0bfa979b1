"""Token schemas and data structures.

These are simple data classes used for transferring token data between
components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

ACCESS_TOKEN_TYPE = "access"  # NOQA: S105
REFRESH_TOKEN_TYPE = "refresh"  # NOQA: S105


@dataclass(frozen=True)
class TokenPair:
    """Access and refresh token issued together."""

    access_token: str
    refresh_token: str

    def __repr__(self) -> str:
        return "TokenPair(access_token=***, refresh_token=***)"


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address
    role
        The user's role at signing time
    token_type
        Either "access" or "refresh"
    exp
        Token expiration timestamp
    issuer
        The ``iss`` claim
    audience
        The ``aud`` claim
    token_id
        The ``jti`` claim, present on refresh tokens only
    """

    user_id: UUID
    email: str
    role: str
    token_type: str
    exp: datetime
    issuer: str
    audience: str
    token_id: str | None = None

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_access_token(self) -> bool:
        """Check if this is an access token."""
        return self.token_type == ACCESS_TOKEN_TYPE

    def is_refresh_token(self) -> bool:
        """Check if this is a refresh token."""
        return self.token_type == REFRESH_TOKEN_TYPE
