# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ...dto.camera_dto import CameraResponse


class SearchCamerasUseCase:
    """Use case for case-insensitive substring search on camera names"""
    
    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository
    
    async def execute(self, name: str) -> List[CameraResponse]:
        cameras = await self.camera_repository.search_by_name(name)
        return [CameraResponse.from_camera(camera) for camera in cameras]
