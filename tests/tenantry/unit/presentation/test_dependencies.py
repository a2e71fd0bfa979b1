"""Tests for the FastAPI dependency providers and app factory."""

from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tenantry.application.dtos import UserDTO
from tenantry.application.services import AuthenticationService
from tenantry.domain.user import User
from tenantry.presentation.api.app import API_VERSION, create_app
from tenantry.presentation.api.dependencies import (
    CurrentUser,
    get_authentication_service,
    get_jwt_service,
    get_password_service,
)
from tenantry.presentation.api.exception_handlers import setup_exception_handlers
from tenantry_auth import JWTService, PasswordHashingService
from tenantry_config import Settings
from tests.shared.fakes import RecordingUnitOfWork



def _settings(**overrides) -> Settings:
    values = {
        "jwt_access_secret": "provider-access-secret",
        "jwt_refresh_secret": "provider-refresh-secret",
        "jwt_issuer": "provider-test",
        "jwt_audience": "spa",
        "jwt_access_token_expire_minutes": 5,
        "jwt_refresh_token_expire_days": 2,
        "password_hash_rounds": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestServiceProviders:
    def test_jwt_service_uses_configured_lifetimes_and_secrets(self):
        settings = _settings()
        service = get_jwt_service(settings)

        assert service.access_token_lifetime == timedelta(minutes=5)
        assert service.refresh_token_lifetime == timedelta(days=2)

        pair = service.issue_pair(uuid4(), "a@example.com", "owner")
        payload = service.verify_access_token(pair.access_token)
        assert payload.issuer == "provider-test"
        assert payload.audience == "spa"

    def test_jwt_service_rejects_shared_secret(self):
        settings = _settings(jwt_refresh_secret="provider-access-secret")

        with pytest.raises(ValueError, match="must differ"):
            get_jwt_service(settings)

    def test_password_service_uses_configured_rounds(self):
        service = get_password_service(_settings(password_hash_rounds=5))

        assert service.rounds == 5


class TestCurrentUser:
    def setup_method(self):
        """Set up test fixtures."""
        self.user = User.create_owner("member@example.com", "hash", uuid4())
        self.user_repo = AsyncMock()
        self.user_repo.find_active_by_id.return_value = self.user

    def _client(self, jwt_service: JWTService) -> TestClient:
        service = AuthenticationService(
            user_repository=self.user_repo,
            organization_repository=AsyncMock(),
            session_repository=AsyncMock(),
            unit_of_work=RecordingUnitOfWork(),
            password_service=PasswordHashingService(rounds=4),
            jwt_service=jwt_service,
        )

        app = FastAPI()
        setup_exception_handlers(app)
        app.dependency_overrides[get_authentication_service] = lambda: service

        @app.get("/me")
        async def me(current_user: CurrentUser) -> dict:
            return current_user.to_dict()

        return TestClient(app)

    def _bearer(self, token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def test_resolves_user_from_access_token(self, jwt_service):
        client = self._client(jwt_service)
        tokens = jwt_service.issue_pair(self.user.id, self.user.email, "owner")

        response = client.get("/me", headers=self._bearer(tokens.access_token))

        assert response.status_code == 200
        assert response.json() == UserDTO.from_user(self.user).to_dict()
        self.user_repo.find_active_by_id.assert_awaited_once_with(self.user.id)

    def test_missing_token_is_unauthorized(self, jwt_service):
        response = self._client(jwt_service).get("/me")

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required"

    def test_refresh_token_is_not_accepted(self, jwt_service):
        client = self._client(jwt_service)
        tokens = jwt_service.issue_pair(self.user.id, self.user.email, "owner")

        response = client.get("/me", headers=self._bearer(tokens.refresh_token))

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_inactive_or_missing_user_is_unauthorized(self, jwt_service):
        self.user_repo.find_active_by_id.return_value = None
        client = self._client(jwt_service)
        tokens = jwt_service.issue_pair(self.user.id, self.user.email, "owner")

        response = client.get("/me", headers=self._bearer(tokens.access_token))

        assert response.status_code == 401
        assert response.json()["detail"] == "User not found or inactive"


class TestCreateApp:
    def test_health(self):
        app = create_app(create_schema=False)

        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": API_VERSION}
