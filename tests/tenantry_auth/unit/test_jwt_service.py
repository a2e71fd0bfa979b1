"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import UUID

import jwt
import pytest

from tenantry_auth import InvalidTokenError, JWTService

TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_EMAIL = "owner@example.com"
TEST_ROLE = "owner"


class TestJWTServiceConstruction:
    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(
                access_secret="",
                refresh_secret="refresh",
                issuer="iss",
                audience="aud",
            )

    def test_shared_secret_rejected(self):
        with pytest.raises(ValueError, match="must differ"):
            JWTService(
                access_secret="same-secret",
                refresh_secret="same-secret",
                issuer="iss",
                audience="aud",
            )

    def test_default_lifetimes(self, jwt_service):
        assert jwt_service.access_token_lifetime == timedelta(minutes=15)
        assert jwt_service.refresh_token_lifetime == timedelta(days=7)


class TestIssuePair:
    def test_both_tokens_share_subject(self, jwt_service):
        pair = jwt_service.issue_pair(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        access = jwt_service.verify_access_token(pair.access_token)
        refresh = jwt_service.verify_refresh_token(pair.refresh_token)

        assert access.user_id == refresh.user_id == TEST_USER_ID
        assert access.email == refresh.email == TEST_EMAIL
        assert access.role == refresh.role == TEST_ROLE

    def test_claims_carry_issuer_and_audience(self, jwt_service):
        pair = jwt_service.issue_pair(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        payload = jwt_service.verify_access_token(pair.access_token)

        assert payload.issuer == "tenantry-test"
        assert payload.audience == "spa"
        assert payload.is_access_token()
        assert not payload.is_expired()

    def test_only_refresh_token_has_token_id(self, jwt_service):
        pair = jwt_service.issue_pair(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        access = jwt_service.verify_access_token(pair.access_token)
        refresh = jwt_service.verify_refresh_token(pair.refresh_token)

        assert access.token_id is None
        assert refresh.token_id is not None
        assert refresh.is_refresh_token()

    def test_refresh_token_ids_are_unique(self, jwt_service):
        first = jwt_service.create_refresh_token(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)
        second = jwt_service.create_refresh_token(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        first_id = jwt_service.verify_refresh_token(first).token_id
        second_id = jwt_service.verify_refresh_token(second).token_id

        assert first_id != second_id

    def test_tokens_use_distinct_secrets(self, jwt_service):
        pair = jwt_service.issue_pair(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(
                pair.refresh_token,
                "test-access-secret-0123456789abcdef0123",
                algorithms=["HS256"],
                audience="spa",
            )

    def test_refresh_outlives_access(self, jwt_service):
        pair = jwt_service.issue_pair(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        access = jwt_service.verify_access_token(pair.access_token)
        refresh = jwt_service.verify_refresh_token(pair.refresh_token)

        assert refresh.exp - access.exp > timedelta(days=6)


class TestVerifyToken:
    def test_refresh_token_rejected_as_access_token(self, jwt_service):
        pair = jwt_service.issue_pair(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        with pytest.raises(InvalidTokenError):
            jwt_service.verify_access_token(pair.refresh_token)

    def test_access_token_rejected_as_refresh_token(self, jwt_service):
        pair = jwt_service.issue_pair(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        with pytest.raises(InvalidTokenError):
            jwt_service.verify_refresh_token(pair.access_token)

    def test_expired_token_rejected(self, jwt_service):
        token = jwt_service.create_access_token(
            TEST_USER_ID,
            TEST_EMAIL,
            TEST_ROLE,
            expires_delta=timedelta(seconds=-10),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            jwt_service.verify_access_token(token)

    def test_wrong_audience_rejected(self, jwt_service):
        other = JWTService(
            access_secret="test-access-secret-0123456789abcdef0123",
            refresh_secret="test-refresh-secret-0123456789abcdef012",
            issuer="tenantry-test",
            audience="mobile",
        )
        token = other.create_access_token(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        with pytest.raises(InvalidTokenError):
            jwt_service.verify_access_token(token)

    def test_wrong_issuer_rejected(self, jwt_service):
        other = JWTService(
            access_secret="test-access-secret-0123456789abcdef0123",
            refresh_secret="test-refresh-secret-0123456789abcdef012",
            issuer="someone-else",
            audience="spa",
        )
        token = other.create_access_token(TEST_USER_ID, TEST_EMAIL, TEST_ROLE)

        with pytest.raises(InvalidTokenError):
            jwt_service.verify_access_token(token)

    def test_garbage_rejected(self, jwt_service):
        with pytest.raises(InvalidTokenError):
            jwt_service.verify_access_token("not.a.token")

    def test_non_uuid_subject_rejected(self, jwt_service):
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "email": TEST_EMAIL,
                "role": TEST_ROLE,
                "type": "access",
                "iss": "tenantry-test",
                "aud": "spa",
                "iat": 1,
                "exp": 4102444800,
            },
            "test-access-secret-0123456789abcdef0123",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            jwt_service.verify_access_token(token)
