# Local application imports
from ....domain.exceptions import NotFoundError
from ....domain.repositories.camera_repository import CameraRepository
from ...dto.camera_dto import CameraResponse


class GetCameraUseCase:
    """Use case for getting a camera by ID"""
    
    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository
    
    async def execute(self, camera_id: int) -> CameraResponse:
        """
        Get a camera by ID
        
        Raises:
            NotFoundError: If camera not found
        """
        camera = await self.camera_repository.find_by_id(camera_id)
        if camera is None:
            raise NotFoundError(f"Camera not found with id: {camera_id}")
        return CameraResponse.from_camera(camera)
