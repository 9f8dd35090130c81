"""
Shared pytest fixtures for camera_api tests.
"""
import os
from unittest.mock import patch

import pytest

from camera_api.core.config import Settings, reset_settings
from camera_api.core.security import PasswordHasher, TokenService


TEST_JWT_SECRET = "test_jwt_secret_key_for_testing_only_0123456789"
TEST_INTERNAL_TOKEN = "internal-test-token"


class FakeClock:
    """Controllable replacement for time.time"""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "STORAGE_BACKEND": "memory",
        "JWT_SECRET": TEST_JWT_SECRET,
        "JWT_TTL_SECONDS": "3600",
        "INTERNAL_API_TOKEN": TEST_INTERNAL_TOKEN,
        "BCRYPT_ROUNDS": "4",
        "SEED_ADMIN_PASSWORD": "admin",
        "CONTENT_MANAGER_URL": "http://content-manager.test:8181",
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def settings(mock_env) -> Settings:
    return Settings()


@pytest.fixture
def password_hasher() -> PasswordHasher:
    # Minimum bcrypt work factor keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_service(clock) -> TokenService:
    return TokenService(secret_key=TEST_JWT_SECRET, ttl_seconds=3600, clock=clock)
