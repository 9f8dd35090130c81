"""
Unit tests for CredentialVerifier.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from camera_api.application.services.credential_verifier import CredentialVerifier
from camera_api.domain.exceptions import InvalidCredentialsError
from camera_api.domain.models.principal import EndUserPrincipal
from camera_api.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


def _user(password_hasher, password="validpass", disabled=False) -> User:
    return User(
        id=1,
        username="alice",
        email="alice@example.com",
        hashed_password=password_hasher.hash(password),
        disabled=disabled,
    )


class TestCredentialVerifier:

    @pytest.mark.asyncio
    async def test_valid_credentials(self, mock_user_repo, password_hasher):
        mock_user_repo.find_by_username.return_value = _user(password_hasher)
        verifier = CredentialVerifier(mock_user_repo, password_hasher)

        principal = await verifier.verify("alice", "validpass")
        assert isinstance(principal, EndUserPrincipal)
        assert principal.user.username == "alice"
        mock_user_repo.find_by_username.assert_awaited_once_with("alice")

    @pytest.mark.asyncio
    async def test_unknown_user(self, mock_user_repo, password_hasher):
        mock_user_repo.find_by_username.return_value = None
        verifier = CredentialVerifier(mock_user_repo, password_hasher)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await verifier.verify("ghost", "whatever")
        assert exc_info.value.message == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_unknown_user_still_runs_a_hash_check(self, mock_user_repo):
        hasher = MagicMock()
        hasher.dummy_hash = "$2b$04$dummy"
        hasher.verify.return_value = False
        mock_user_repo.find_by_username.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await CredentialVerifier(mock_user_repo, hasher).verify("ghost", "pw")
        hasher.verify.assert_called_once_with("pw", "$2b$04$dummy")

    @pytest.mark.asyncio
    async def test_wrong_password(self, mock_user_repo, password_hasher):
        mock_user_repo.find_by_username.return_value = _user(password_hasher)
        verifier = CredentialVerifier(mock_user_repo, password_hasher)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await verifier.verify("alice", "wrongpass")
        assert exc_info.value.message == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_disabled_user_is_indistinguishable(self, mock_user_repo, password_hasher):
        mock_user_repo.find_by_username.return_value = _user(password_hasher, disabled=True)
        verifier = CredentialVerifier(mock_user_repo, password_hasher)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await verifier.verify("alice", "validpass")
        assert exc_info.value.message == "Invalid credentials"
        assert exc_info.value.error == "Invalid credentials"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password", [(None, "validpass"), ("alice", None), ("", "validpass")])
    async def test_missing_credentials(self, mock_user_repo, password_hasher, username, password):
        verifier = CredentialVerifier(mock_user_repo, password_hasher)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await verifier.verify(username, password)
        assert exc_info.value.message == "Invalid credentials"
        mock_user_repo.find_by_username.assert_not_awaited()
