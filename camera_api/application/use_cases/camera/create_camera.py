# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import BadRequestError, ConflictError
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.models.camera import Camera
from ...dto.camera_dto import CameraCreateRequest, CameraResponse

logger = logging.getLogger(__name__)


def duplicate_name_message(existing: Camera) -> str:
    """Conflict message describing the camera that already owns a name"""
    return (
        f"Camera name '{existing.name}' already exists "
        f"(id: {existing.id}, device: {existing.device}, "
        f"resolution: {existing.resolution}, fps: {existing.fps})"
    )


class CreateCameraUseCase:
    """Use case for creating a new camera"""
    
    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository
    
    async def execute(self, request: CameraCreateRequest, created_by: str) -> CameraResponse:
        """
        Create a new camera
        
        Args:
            request: Camera creation request
            created_by: Name of the principal creating the camera (for logs)
            
        Returns:
            CameraResponse with created camera information
            
        Raises:
            BadRequestError: If the name is missing or blank
            ConflictError: If another camera has the same name, ignoring case
                and surrounding whitespace
        """
        if request.name is None or not request.name.strip():
            raise BadRequestError("Camera name is required", "Invalid camera name")
        
        name = request.name.strip()
        existing = await self.camera_repository.find_by_name_ignore_case(name)
        if existing is not None:
            raise ConflictError(duplicate_name_message(existing), "Duplicate camera name")
        
        new_camera = Camera(
            id=None,
            name=name,
            device=request.device,
            resolution=request.resolution,
            fps=request.fps,
            post_url=request.post_url,
            codec=request.codec,
            preset=request.preset,
            tune=request.tune,
            buffer=request.buffer,
            rotation=request.rotation,
        )
        
        saved_camera = await self.camera_repository.save(new_camera)
        logger.info(f"Camera {saved_camera.id} ('{saved_camera.name}') created by {created_by}")
        
        return CameraResponse.from_camera(saved_camera)
