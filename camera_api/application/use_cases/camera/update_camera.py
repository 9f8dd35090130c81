# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import BadRequestError, ConflictError, NotFoundError
from ....domain.repositories.camera_repository import CameraRepository
from ...dto.camera_dto import CameraResponse, CameraUpdateRequest
from .create_camera import duplicate_name_message

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "device",
    "resolution",
    "fps",
    "post_url",
    "codec",
    "preset",
    "tune",
    "buffer",
    "rotation",
)


class UpdateCameraUseCase:
    """Use case for partially updating a camera"""
    
    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository
    
    async def execute(self, camera_id: int, request: CameraUpdateRequest) -> CameraResponse:
        """
        Apply the non-null fields of ``request`` to the camera
        
        Raises:
            NotFoundError: If camera not found
            BadRequestError: If the new name is blank
            ConflictError: If the new name belongs to another camera
        """
        camera = await self.camera_repository.find_by_id(camera_id)
        if camera is None:
            raise NotFoundError(f"Camera not found with id: {camera_id}")
        
        if request.name is not None:
            name = request.name.strip()
            if not name:
                raise BadRequestError("Camera name is required", "Invalid camera name")
            existing = await self.camera_repository.find_by_name_ignore_case(name)
            if existing is not None and existing.id != camera.id:
                raise ConflictError(duplicate_name_message(existing), "Duplicate camera name")
            camera.name = name
        
        for field in _UPDATABLE_FIELDS:
            value = getattr(request, field)
            if value is not None:
                setattr(camera, field, value)
        
        updated = await self.camera_repository.save(camera)
        logger.info(f"Camera {updated.id} updated")
        return CameraResponse.from_camera(updated)
