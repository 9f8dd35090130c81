from .memory_user_repository import InMemoryUserRepository
from .memory_camera_repository import InMemoryCameraRepository

__all__ = ["InMemoryUserRepository", "InMemoryCameraRepository"]
