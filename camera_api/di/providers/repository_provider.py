from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.camera_repository import CameraRepository
from ...infrastructure.db.sql_user_repository import SqlUserRepository
from ...infrastructure.db.sql_camera_repository import SqlCameraRepository
from ...infrastructure.memory.memory_user_repository import InMemoryUserRepository
from ...infrastructure.memory.memory_camera_repository import InMemoryCameraRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations for the configured backend.
        """
        settings: Settings = container.get(Settings)
        
        if settings.storage_backend == "memory":
            container.register_singleton(UserRepository, InMemoryUserRepository())
            container.register_singleton(CameraRepository, InMemoryCameraRepository())
            return
        
        session_factory = container.get("session_factory")
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            SqlUserRepository(session_factory=session_factory)
        )
        
        container.register_singleton(
            CameraRepository,
            SqlCameraRepository(session_factory=session_factory)
        )
