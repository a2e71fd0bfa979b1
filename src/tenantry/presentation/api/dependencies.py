"""FastAPI dependency providers.

Provides dependencies for:
- Database engine and sessions
- Password hashing and JWT services configured from settings
- The authentication service
- The current principal (from a bearer access token)
"""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tenantry.application.dtos import UserDTO
from tenantry.application.services import AuthenticationService
from tenantry.domain.shared.exceptions import UnauthorizedError
from tenantry.infrastructure.persistence.sqlalchemy import (
    OrganizationRepositorySQLAlchemy,
    SessionRepositorySQLAlchemy,
    UnitOfWorkSQLAlchemy,
    UserRepositorySQLAlchemy,
    create_engine,
    create_session_maker,
)
from tenantry_auth import JWTService, PasswordHashingService
from tenantry_config import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


def get_api_settings() -> Settings:
    """Settings provider (overridable in tests)."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Shared async engine; reused across requests."""
    return create_engine(get_settings().database_url)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return create_session_maker(get_engine())


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        access_secret=settings.jwt_access_secret.get_secret_value(),
        refresh_secret=settings.jwt_refresh_secret.get_secret_value(),
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


async def get_authentication_service(
    session: DBSession,
    settings: SettingsDep,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Authentication service bound to the request's database session."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        organization_repository=OrganizationRepositorySQLAlchemy(session),
        session_repository=SessionRepositorySQLAlchemy(session),
        unit_of_work=UnitOfWorkSQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        session_ttl=timedelta(days=settings.session_ttl_days),
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UserDTO:
    """
    Resolve the authenticated user from the bearer access token.

    Raises
    ------
    InvalidTokenError
        If the token fails verification (mapped to 401)
    UnauthorizedError
        If no token is sent, or the user is missing or deactivated
    """
    if credentials is None:
        msg = "Authentication required"
        raise UnauthorizedError(msg)

    payload = auth_service.verify_access_token(credentials.credentials)

    user = await auth_service.validate_user(payload.user_id)
    if user is None:
        logger.warning("No active user for token subject: %s", payload.user_id)
        msg = "User not found or inactive"
        raise UnauthorizedError(msg)

    return user


CurrentUser = Annotated[UserDTO, Depends(get_current_user)]
