# Standard library imports
from typing import List, Optional

# External package imports
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Local application imports
from ...domain.exceptions import NotFoundError
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.models.camera import Camera, normalize_camera_name
from .errors import storage_errors
from .orm_models import CameraRecord


def _camera_conflict_message(error: IntegrityError) -> str:
    return "Camera name already exists"


def _escape_like(fragment: str) -> str:
    return fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlCameraRepository(CameraRepository):
    """SQLAlchemy implementation of CameraRepository"""
    
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
    
    async def find_by_id(self, camera_id: int) -> Optional[Camera]:
        with storage_errors("finding camera by ID"):
            async with self.session_factory() as session:
                record = await session.get(CameraRecord, camera_id)
                return self._record_to_camera(record) if record is not None else None
    
    async def find_all(self) -> List[Camera]:
        with storage_errors("listing cameras"):
            async with self.session_factory() as session:
                records = await session.scalars(select(CameraRecord).order_by(CameraRecord.id))
                return [self._record_to_camera(record) for record in records]
    
    async def find_by_name_ignore_case(self, name: str) -> Optional[Camera]:
        key = normalize_camera_name(name)
        if not key:
            return None
        with storage_errors("finding camera by name"):
            async with self.session_factory() as session:
                record = (
                    await session.scalars(select(CameraRecord).where(CameraRecord.name_key == key))
                ).one_or_none()
                return self._record_to_camera(record) if record is not None else None
    
    async def search_by_name(self, fragment: str) -> List[Camera]:
        """
        Find cameras whose name contains ``fragment``, ignoring case
        
        Args:
            fragment: Substring to look for; empty matches every camera
            
        Returns:
            List of Camera domain models ordered by ID
        """
        pattern = f"%{_escape_like(fragment.lower())}%"
        with storage_errors("searching cameras"):
            async with self.session_factory() as session:
                records = await session.scalars(
                    select(CameraRecord)
                    .where(func.lower(CameraRecord.name).like(pattern, escape="\\"))
                    .order_by(CameraRecord.id)
                )
                return [self._record_to_camera(record) for record in records]
    
    async def save(self, camera: Camera) -> Camera:
        """
        Save camera (create new or update existing)
        
        Raises:
            ConflictError: If the normalized name is already taken
            NotFoundError: If updating an ID that does not exist
        """
        with storage_errors("saving camera", _camera_conflict_message):
            async with self.session_factory.begin() as session:
                if camera.id is None:
                    record = CameraRecord()
                    session.add(record)
                else:
                    record = await session.get(CameraRecord, camera.id)
                    if record is None:
                        raise NotFoundError(f"Camera not found with id: {camera.id}")
                self._apply_camera(record, camera)
                await session.flush()
                return self._record_to_camera(record)
    
    async def delete(self, camera_id: int) -> None:
        with storage_errors("deleting camera"):
            async with self.session_factory.begin() as session:
                await session.execute(delete(CameraRecord).where(CameraRecord.id == camera_id))
    
    @staticmethod
    def _apply_camera(record: CameraRecord, camera: Camera) -> None:
        record.name = camera.name
        record.name_key = camera.name_key
        record.device = camera.device
        record.resolution = camera.resolution
        record.fps = camera.fps
        record.post_url = camera.post_url
        record.codec = camera.codec
        record.preset = camera.preset
        record.tune = camera.tune
        record.buffer = camera.buffer
        record.rotation = camera.rotation
    
    @staticmethod
    def _record_to_camera(record: CameraRecord) -> Camera:
        return Camera(
            id=record.id,
            name=record.name,
            device=record.device,
            resolution=record.resolution,
            fps=record.fps,
            post_url=record.post_url,
            codec=record.codec,
            preset=record.preset,
            tune=record.tune,
            buffer=record.buffer,
            rotation=record.rotation,
        )
