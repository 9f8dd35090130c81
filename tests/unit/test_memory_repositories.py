"""
Tests for the in-memory repositories.
"""
import pytest

from camera_api.domain.exceptions import ConflictError, NotFoundError
from camera_api.domain.models.camera import Camera
from camera_api.domain.models.user import User
from camera_api.infrastructure.memory import InMemoryCameraRepository, InMemoryUserRepository


def _user(username, email=None):
    return User(id=None, username=username, email=email or f"{username}@example.com", hashed_password="h")


class TestInMemoryUserRepository:

    @pytest.mark.asyncio
    async def test_ids_are_assigned_in_order(self):
        repo = InMemoryUserRepository()
        first = await repo.save(_user("alice"))
        second = await repo.save(_user("bob"))
        assert (first.id, second.id) == (1, 2)
        assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_returned_users_are_copies(self):
        repo = InMemoryUserRepository()
        saved = await repo.save(_user("alice"))
        saved.name = "changed"
        assert (await repo.find_by_id(saved.id)).name is None

    @pytest.mark.asyncio
    async def test_uniqueness(self):
        repo = InMemoryUserRepository()
        await repo.save(_user("alice"))
        with pytest.raises(ConflictError):
            await repo.save(_user("alice", email="x@example.com"))
        with pytest.raises(ConflictError):
            await repo.save(_user("bob", email="alice@example.com"))

    @pytest.mark.asyncio
    async def test_update_missing_id(self):
        repo = InMemoryUserRepository()
        ghost = _user("ghost")
        ghost.id = 5
        with pytest.raises(NotFoundError):
            await repo.save(ghost)


class TestInMemoryCameraRepository:

    @pytest.mark.asyncio
    async def test_name_uniqueness_ignores_case(self):
        repo = InMemoryCameraRepository()
        await repo.save(Camera(id=None, name="Yard"))
        with pytest.raises(ConflictError):
            await repo.save(Camera(id=None, name=" yard "))

    @pytest.mark.asyncio
    async def test_resave_keeps_own_name(self):
        repo = InMemoryCameraRepository()
        saved = await repo.save(Camera(id=None, name="Yard"))
        saved.name = "YARD"
        assert (await repo.save(saved)).name == "YARD"

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self):
        repo = InMemoryCameraRepository()
        saved = await repo.save(Camera(id=None, name="Yard"))
        await repo.delete(saved.id)
        await repo.delete(saved.id)
        assert await repo.find_all() == []
