"""Authentication service for registration, login and principal lookup."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING
from uuid import UUID

from tenantry.application.dtos import (
    AuthResult,
    LoginCommand,
    RegisterCommand,
    UserDTO,
)
from tenantry.domain.organization import Organization
from tenantry.domain.session import AuthSession
from tenantry.domain.user import (
    AccountDeactivatedError,
    Email,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    User,
)
from tenantry_auth import JWTService, PasswordHashingService, TokenPair, TokenPayload

if TYPE_CHECKING:
    from tenantry.application.ports import UnitOfWork
    from tenantry.domain.organization import OrganizationRepository
    from tenantry.domain.session import SessionRepository
    from tenantry.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates tenantry_auth infrastructure (password hashing, JWT tokens)
    with the organization, user and session domains to provide:
    - Registration (founds an organization with the user as owner)
    - Login with password
    - Re-resolving an authenticated principal

    All writes of one call share the injected unit of work, so a failed
    registration leaves no partial organization, user or session behind.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        organization_repository: OrganizationRepository,
        session_repository: SessionRepository,
        unit_of_work: UnitOfWork,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        session_ttl: timedelta = AuthSession.DEFAULT_TTL,
    ):
        self._user_repo = user_repository
        self._organization_repo = organization_repository
        self._session_repo = session_repository
        self._unit_of_work = unit_of_work
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._session_ttl = session_ttl

    def _issue_tokens(self, user: User) -> TokenPair:
        return self._jwt_service.issue_pair(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
        )

    async def register(self, command: RegisterCommand) -> AuthResult:
        async with self._unit_of_work:
            existing_user = await self._user_repo.find_by_email(command.email)
            if existing_user is not None:
                raise EmailAlreadyExistsError(existing_user.email)

            password_hash = self._password_service.hash(command.password)

            organization = Organization.create(command.organization_name)
            await self._organization_repo.save(organization)

            user = User.create_owner(
                email=command.email,
                password_hash=password_hash,
                organization_id=organization.id,
            )
            await self._user_repo.save(user)

            organization.add_member(user.id)
            await self._organization_repo.save(organization)

            tokens = self._issue_tokens(user)

            auth_session = AuthSession.start(
                user_id=user.id,
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                ttl=self._session_ttl,
            )
            await self._session_repo.save(auth_session)

        logger.info(
            "User registered: %s (organization: %s)",
            user.email,
            organization.id,
        )
        return AuthResult(user=UserDTO.from_user(user), tokens=tokens)

    async def login(self, command: LoginCommand) -> AuthResult:
        async with self._unit_of_work:
            email = Email.parse(command.email)
            user = None if email is None else await self._user_repo.find_by_email(email)
            if user is None:
                msg = "User not found"
                raise InvalidCredentialsError(msg)

            if not user.is_active:
                raise AccountDeactivatedError

            if not self._password_service.verify(command.password, user.password_hash):
                msg = "Password is incorrect"
                raise InvalidCredentialsError(msg)

            tokens = self._issue_tokens(user)

            user.touch()
            await self._user_repo.save(user)

        logger.info("User logged in: %s", user.email)
        return AuthResult(user=UserDTO.from_user(user), tokens=tokens)

    async def validate_user(self, user_id: UUID) -> UserDTO | None:
        user = await self._user_repo.find_active_by_id(user_id)
        if user is None:
            logger.debug("No active user for id: %s", user_id)
            return None
        return UserDTO.from_user(user)

    def verify_access_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_access_token(token)
