# Standard library imports
import asyncio
import dataclasses
from typing import Dict, List, Optional

# Local application imports
from ...domain.exceptions import ConflictError, NotFoundError
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.models.camera import Camera, normalize_camera_name


class InMemoryCameraRepository(CameraRepository):
    """Process-local implementation of CameraRepository"""
    
    def __init__(self) -> None:
        self._cameras: Dict[int, Camera] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()
    
    async def find_by_id(self, camera_id: int) -> Optional[Camera]:
        camera = self._cameras.get(camera_id)
        return dataclasses.replace(camera) if camera is not None else None
    
    async def find_all(self) -> List[Camera]:
        return [dataclasses.replace(self._cameras[key]) for key in sorted(self._cameras)]
    
    async def find_by_name_ignore_case(self, name: str) -> Optional[Camera]:
        key = normalize_camera_name(name)
        for camera in self._cameras.values():
            if camera.name_key == key:
                return dataclasses.replace(camera)
        return None
    
    async def search_by_name(self, fragment: str) -> List[Camera]:
        needle = fragment.lower()
        return [
            dataclasses.replace(self._cameras[key])
            for key in sorted(self._cameras)
            if needle in self._cameras[key].name.lower()
        ]
    
    async def save(self, camera: Camera) -> Camera:
        async with self._lock:
            if camera.id is not None and camera.id not in self._cameras:
                raise NotFoundError(f"Camera not found with id: {camera.id}")
            for other in self._cameras.values():
                if other.id != camera.id and other.name_key == camera.name_key:
                    raise ConflictError("Camera name already exists")
            
            stored = dataclasses.replace(camera)
            if stored.id is None:
                stored.id = self._next_id
                self._next_id += 1
            self._cameras[stored.id] = stored
            return dataclasses.replace(stored)
    
    async def delete(self, camera_id: int) -> None:
        async with self._lock:
            self._cameras.pop(camera_id, None)
