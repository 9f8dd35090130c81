"""
Unit tests for user management use cases, run against the in-memory repository.
"""
import pytest

from camera_api.application.dto.auth_dto import UserRegistrationRequest
from camera_api.application.dto.user_dto import UserUpdateRequest
from camera_api.application.use_cases.auth.register_user import RegisterUserUseCase
from camera_api.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from camera_api.domain.exceptions import ConflictError, NotFoundError
from camera_api.infrastructure.memory import InMemoryUserRepository


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def create_user(user_repo, password_hasher):
    use_case = CreateUserUseCase(RegisterUserUseCase(user_repo, password_hasher))

    async def _create(username, email=None, password="pw"):
        request = UserRegistrationRequest(
            username=username, email=email or f"{username}@example.com", password=password
        )
        return await use_case.execute(request, created_by="admin")

    return _create


class TestCreateAndReadUsers:

    @pytest.mark.asyncio
    async def test_create_hashes_password(self, user_repo, create_user, password_hasher):
        created = await create_user("carol", password="secret")
        stored = await user_repo.find_by_id(created.id)
        assert stored.hashed_password != "secret"
        assert password_hasher.verify("secret", stored.hashed_password)

    @pytest.mark.asyncio
    async def test_create_duplicate_username(self, create_user):
        await create_user("carol")
        with pytest.raises(ConflictError) as exc_info:
            await create_user("carol", email="other@example.com")
        assert exc_info.value.message == "Username already exists"

    @pytest.mark.asyncio
    async def test_list_users(self, user_repo, create_user):
        await create_user("carol")
        await create_user("dave")
        result = await ListUsersUseCase(user_repo).execute()
        assert [u.username for u in result] == ["carol", "dave"]
        assert "hashed_password" not in result[0].model_dump()

    @pytest.mark.asyncio
    async def test_get_user(self, user_repo, create_user):
        created = await create_user("carol")
        assert (await GetUserUseCase(user_repo).execute(created.id)).username == "carol"
        assert (await GetUserUseCase(user_repo).execute_by_username("carol")).id == created.id

    @pytest.mark.asyncio
    async def test_get_missing_user(self, user_repo):
        with pytest.raises(NotFoundError) as exc_info:
            await GetUserUseCase(user_repo).execute(12)
        assert exc_info.value.message == "User not found with id: 12"

        with pytest.raises(NotFoundError):
            await GetUserUseCase(user_repo).execute_by_username("ghost")


class TestUpdateUserUseCase:

    @pytest.mark.asyncio
    async def test_partial_update(self, user_repo, create_user, password_hasher):
        created = await create_user("carol")
        result = await UpdateUserUseCase(user_repo, password_hasher).execute(
            created.id, UserUpdateRequest(name="Carol C.", photo="carol.png")
        )
        assert result.name == "Carol C."
        assert result.photo == "carol.png"
        assert result.email == "carol@example.com"

    @pytest.mark.asyncio
    async def test_password_change_is_rehashed(self, user_repo, create_user, password_hasher):
        created = await create_user("carol", password="old")
        await UpdateUserUseCase(user_repo, password_hasher).execute(
            created.id, UserUpdateRequest.model_validate({"hashedPassword": "new"})
        )
        stored = await user_repo.find_by_id(created.id)
        assert password_hasher.verify("new", stored.hashed_password)
        assert not password_hasher.verify("old", stored.hashed_password)

    @pytest.mark.asyncio
    async def test_username_taken_by_other(self, user_repo, create_user, password_hasher):
        await create_user("carol")
        dave = await create_user("dave")
        with pytest.raises(ConflictError) as exc_info:
            await UpdateUserUseCase(user_repo, password_hasher).execute(
                dave.id, UserUpdateRequest(username="carol")
            )
        assert exc_info.value.message == "Username already exists"

    @pytest.mark.asyncio
    async def test_email_taken_by_other(self, user_repo, create_user, password_hasher):
        await create_user("carol")
        dave = await create_user("dave")
        with pytest.raises(ConflictError) as exc_info:
            await UpdateUserUseCase(user_repo, password_hasher).execute(
                dave.id, UserUpdateRequest(email="carol@example.com")
            )
        assert exc_info.value.message == "Email already exists"

    @pytest.mark.asyncio
    async def test_update_missing_user(self, user_repo, password_hasher):
        with pytest.raises(NotFoundError):
            await UpdateUserUseCase(user_repo, password_hasher).execute(3, UserUpdateRequest(name="x"))


class TestDeleteUserUseCase:

    @pytest.mark.asyncio
    async def test_delete_user(self, user_repo, create_user):
        created = await create_user("carol")
        await DeleteUserUseCase(user_repo).execute(created.id)
        assert await user_repo.find_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, user_repo):
        with pytest.raises(NotFoundError):
            await DeleteUserUseCase(user_repo).execute(8)
