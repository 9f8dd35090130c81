# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import NotFoundError
from ....domain.repositories.camera_repository import CameraRepository

logger = logging.getLogger(__name__)


class DeleteCameraUseCase:
    """Use case for deleting a camera"""
    
    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository
    
    async def execute(self, camera_id: int) -> None:
        if await self.camera_repository.find_by_id(camera_id) is None:
            raise NotFoundError(f"Camera not found with id: {camera_id}")
        await self.camera_repository.delete(camera_id)
        logger.info(f"Camera {camera_id} deleted")
