from typing import TYPE_CHECKING
from ...domain.repositories.camera_repository import CameraRepository
from ...application.use_cases.camera import (
    CreateCameraUseCase,
    DeleteCameraUseCase,
    GetCameraUseCase,
    ListCamerasUseCase,
    SearchCamerasUseCase,
    UpdateCameraUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CameraProvider:
    """Camera use case provider - registers all camera-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all camera use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            CreateCameraUseCase,
            ListCamerasUseCase,
            GetCameraUseCase,
            UpdateCameraUseCase,
            DeleteCameraUseCase,
            SearchCamerasUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    camera_repository=container.get(CameraRepository)
                )
            )
