"""JWT token service.

Issues and verifies the access/refresh token pair. Each token type has its
own signing secret and lifetime; both share the issuer and audience claims
that verifiers must check.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from tenantry_auth.exceptions import InvalidTokenError
from tenantry_auth.schemas import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    TokenPair,
    TokenPayload,
)


class JWTService:
    """Service for JWT token creation and verification.

    Handles access tokens (short-lived) and refresh tokens (long-lived)
    for user authentication.

    Examples
    --------
    >>> service = JWTService(
    ...     access_secret="access-secret",
    ...     refresh_secret="refresh-secret",
    ...     issuer="tenantry",
    ...     audience="spa",
    ... )
    >>> pair = service.issue_pair(user_id, "user@example.com", "owner")
    >>> payload = service.verify_access_token(pair.access_token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_MINUTES = 15
    DEFAULT_REFRESH_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "exp", "iat", "iss", "aud")

    def __init__(  # noqa: PLR0913
        self,
        access_secret: str,
        refresh_secret: str,
        issuer: str,
        audience: str,
        access_token_expire_minutes: int = DEFAULT_ACCESS_EXPIRE_MINUTES,
        refresh_token_expire_days: int = DEFAULT_REFRESH_EXPIRE_DAYS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        access_secret
            Secret for signing access tokens. Must be kept secure.
        refresh_secret
            Secret for signing refresh tokens. Must differ from the
            access secret so one token type can never pass as the other.
        issuer
            Value of the ``iss`` claim on every token
        audience
            Value of the ``aud`` claim on every token
        access_token_expire_minutes
            Minutes until access token expires (default 15)
        refresh_token_expire_days
            Days until refresh token expires (default 7)
        """
        if not access_secret or not refresh_secret:
            msg = "JWT secrets cannot be empty"
            raise ValueError(msg)
        if access_secret == refresh_secret:
            msg = "Access and refresh token secrets must differ"
            raise ValueError(msg)

        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self._issuer = issuer
        self._audience = audience
        self._access_expire = timedelta(minutes=access_token_expire_minutes)
        self._refresh_expire = timedelta(days=refresh_token_expire_days)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    @property
    def refresh_token_lifetime(self) -> timedelta:
        return self._refresh_expire

    def issue_pair(self, user_id: UUID, email: str, role: str) -> TokenPair:
        """Create an access token and a refresh token for the same user."""
        return TokenPair(
            access_token=self.create_access_token(user_id, email, role),
            refresh_token=self.create_refresh_token(user_id, email, role),
        )

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a short-lived access token.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        role
            The user's role
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        return self._create_token(
            secret=self._access_secret,
            claims={"sub": str(user_id), "email": email, "role": role},
            token_type=ACCESS_TOKEN_TYPE,
            expires_delta=expires_delta or self._access_expire,
        )

    def create_refresh_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a long-lived refresh token.

        Each refresh token carries a random ``jti`` so an individual token
        can be told apart from others issued to the same user.
        """
        return self._create_token(
            secret=self._refresh_secret,
            claims={
                "sub": str(user_id),
                "email": email,
                "role": role,
                "jti": str(uuid4()),
            },
            token_type=REFRESH_TOKEN_TYPE,
            expires_delta=expires_delta or self._refresh_expire,
        )

    def verify_access_token(self, token: str) -> TokenPayload:
        """Verify and decode an access token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, malformed or not an access token
        """
        return self._verify(token, self._access_secret, ACCESS_TOKEN_TYPE)

    def verify_refresh_token(self, token: str) -> TokenPayload:
        """Verify and decode a refresh token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, malformed or not a refresh token
        """
        return self._verify(token, self._refresh_secret, REFRESH_TOKEN_TYPE)

    def _verify(self, token: str, secret: str, expected_type: str) -> TokenPayload:
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": list(self.REQUIRED_CLAIMS)},
            )

            token_type = payload.get("type", ACCESS_TOKEN_TYPE)
            if token_type != expected_type:
                msg = f"Expected {expected_type} token, got {token_type}"
                raise InvalidTokenError(msg)

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=payload["email"],
                role=payload["role"],
                token_type=token_type,
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                issuer=payload["iss"],
                audience=payload["aud"],
                token_id=payload.get("jti"),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def _create_token(
        self,
        secret: str,
        claims: dict[str, str],
        token_type: str,
        expires_delta: timedelta,
    ) -> str:
        now = datetime.now(tz=timezone.utc)

        payload = {
            **claims,
            "type": token_type,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": now,
            "exp": now + expires_delta,
        }

        return jwt.encode(payload, secret, algorithm=self.ALGORITHM)
