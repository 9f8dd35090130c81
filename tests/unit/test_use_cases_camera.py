"""
Unit tests for camera use cases, run against the in-memory repository.
"""
import pytest

from camera_api.application.dto.camera_dto import CameraCreateRequest, CameraUpdateRequest
from camera_api.application.use_cases.camera import (
    CreateCameraUseCase,
    DeleteCameraUseCase,
    GetCameraUseCase,
    ListCamerasUseCase,
    SearchCamerasUseCase,
    UpdateCameraUseCase,
)
from camera_api.domain.exceptions import BadRequestError, ConflictError, NotFoundError
from camera_api.infrastructure.memory import InMemoryCameraRepository


@pytest.fixture
def camera_repo():
    return InMemoryCameraRepository()


async def _create(repo, name, **fields):
    return await CreateCameraUseCase(repo).execute(CameraCreateRequest(name=name, **fields), "alice")


class TestCreateCameraUseCase:

    @pytest.mark.asyncio
    async def test_create_camera(self, camera_repo):
        result = await _create(camera_repo, "Front Door", device="/dev/video0", fps="30")
        assert result.id == 1
        assert result.name == "Front Door"
        assert result.device == "/dev/video0"
        assert result.fps == "30"

    @pytest.mark.asyncio
    async def test_create_trims_name(self, camera_repo):
        result = await _create(camera_repo, "  Garage  ")
        assert result.name == "Garage"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_blank_name_rejected(self, camera_repo, name):
        with pytest.raises(BadRequestError) as exc_info:
            await _create(camera_repo, name)
        assert exc_info.value.message == "Camera name is required"
        assert await camera_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_duplicate_name_ignores_case_and_whitespace(self, camera_repo):
        first = await _create(camera_repo, "Front Door", device="/dev/video0", resolution="1280x720", fps="30")

        with pytest.raises(ConflictError) as exc_info:
            await _create(camera_repo, "  front door ")
        message = exc_info.value.message
        assert "Front Door" in message
        assert f"id: {first.id}" in message
        assert "/dev/video0" in message
        assert "1280x720" in message
        assert exc_info.value.error == "Duplicate camera name"


class TestReadCameraUseCases:

    @pytest.mark.asyncio
    async def test_get_camera(self, camera_repo):
        created = await _create(camera_repo, "Yard")
        result = await GetCameraUseCase(camera_repo).execute(created.id)
        assert result.name == "Yard"

    @pytest.mark.asyncio
    async def test_get_missing_camera(self, camera_repo):
        with pytest.raises(NotFoundError) as exc_info:
            await GetCameraUseCase(camera_repo).execute(99)
        assert exc_info.value.message == "Camera not found with id: 99"

    @pytest.mark.asyncio
    async def test_list_cameras(self, camera_repo):
        await _create(camera_repo, "A")
        await _create(camera_repo, "B")
        result = await ListCamerasUseCase(camera_repo).execute()
        assert [c.name for c in result] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, camera_repo):
        await _create(camera_repo, "Front Door")
        await _create(camera_repo, "Back Door")
        await _create(camera_repo, "Garage")

        result = await SearchCamerasUseCase(camera_repo).execute("DOOR")
        assert sorted(c.name for c in result) == ["Back Door", "Front Door"]
        assert await SearchCamerasUseCase(camera_repo).execute("attic") == []


class TestUpdateCameraUseCase:

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, camera_repo):
        created = await _create(camera_repo, "Yard", device="/dev/video1", fps="15")

        result = await UpdateCameraUseCase(camera_repo).execute(
            created.id, CameraUpdateRequest(fps="25", post_url="http://cm/yard")
        )
        assert result.fps == "25"
        assert result.post_url == "http://cm/yard"
        assert result.device == "/dev/video1"
        assert result.name == "Yard"

    @pytest.mark.asyncio
    async def test_rename_to_own_name_with_other_case(self, camera_repo):
        created = await _create(camera_repo, "Yard")
        result = await UpdateCameraUseCase(camera_repo).execute(created.id, CameraUpdateRequest(name="YARD"))
        assert result.name == "YARD"

    @pytest.mark.asyncio
    async def test_rename_to_taken_name(self, camera_repo):
        await _create(camera_repo, "Yard")
        other = await _create(camera_repo, "Porch")

        with pytest.raises(ConflictError):
            await UpdateCameraUseCase(camera_repo).execute(other.id, CameraUpdateRequest(name=" yard"))

    @pytest.mark.asyncio
    async def test_blank_rename_rejected(self, camera_repo):
        created = await _create(camera_repo, "Yard")
        with pytest.raises(BadRequestError):
            await UpdateCameraUseCase(camera_repo).execute(created.id, CameraUpdateRequest(name="  "))

    @pytest.mark.asyncio
    async def test_update_missing_camera(self, camera_repo):
        with pytest.raises(NotFoundError):
            await UpdateCameraUseCase(camera_repo).execute(5, CameraUpdateRequest(fps="1"))


class TestDeleteCameraUseCase:

    @pytest.mark.asyncio
    async def test_delete_camera(self, camera_repo):
        created = await _create(camera_repo, "Yard")
        await DeleteCameraUseCase(camera_repo).execute(created.id)
        assert await camera_repo.find_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_camera(self, camera_repo):
        with pytest.raises(NotFoundError):
            await DeleteCameraUseCase(camera_repo).execute(42)
