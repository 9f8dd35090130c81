from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.camera import Camera


class CameraRepository(ABC):
    """Repository interface - defines contract for camera data access"""
    
    @abstractmethod
    async def find_by_id(self, camera_id: int) -> Optional[Camera]:
        """Find camera by ID"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[Camera]:
        """List all cameras ordered by ID"""
        pass
    
    @abstractmethod
    async def find_by_name_ignore_case(self, name: str) -> Optional[Camera]:
        """Find camera whose trimmed name matches ``name`` case-insensitively"""
        pass
    
    @abstractmethod
    async def search_by_name(self, fragment: str) -> List[Camera]:
        """Find cameras whose name contains ``fragment`` (case-insensitive)"""
        pass
    
    @abstractmethod
    async def save(self, camera: Camera) -> Camera:
        """Save camera (create or update)"""
        pass
    
    @abstractmethod
    async def delete(self, camera_id: int) -> None:
        """Delete camera by ID (no-op when absent)"""
        pass
