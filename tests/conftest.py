"""Root pytest configuration.

Test Structure:
    tests/
    ├── tenantry/              # Identity domain, application and adapters
    │   ├── unit/              # Fast, isolated tests (mocks only)
    │   └── integration/       # Tests against SQLite via aiosqlite
    ├── tenantry_auth/         # Password hashing and JWT tests
    ├── tenantry_config/       # Settings and logging tests
    └── shared/                # Shared fixtures and utilities

Settings are read from the environment; the JWT secrets below are set
before any test asks for them so tests never depend on a local .env file.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from tenantry_auth import JWTService, PasswordHashingService
from tenantry_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load config/.env.test if present (never the dev/prod files)
if (PROJECT_ROOT / "config" / ".env.test").exists():
    load_dotenv(PROJECT_ROOT / "config" / ".env.test")

TEST_ACCESS_SECRET = "test-access-secret-0123456789abcdef0123"  # NOQA: S105
TEST_REFRESH_SECRET = "test-refresh-secret-0123456789abcdef012"  # NOQA: S105
TEST_ISSUER = "tenantry-test"
TEST_AUDIENCE = "spa"

os.environ.setdefault("JWT_ACCESS_SECRET", TEST_ACCESS_SECRET)
os.environ.setdefault("JWT_REFRESH_SECRET", TEST_REFRESH_SECRET)
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with an empty settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """bcrypt with the minimum work factor to keep tests fast."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(
        access_secret=TEST_ACCESS_SECRET,
        refresh_secret=TEST_REFRESH_SECRET,
        issuer=TEST_ISSUER,
        audience=TEST_AUDIENCE,
    )
