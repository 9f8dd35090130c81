from typing import TYPE_CHECKING
from ...core.config import Settings
from ...application.use_cases.upload.upload_file import UploadFileUseCase
from ...infrastructure.external.content_manager_client import ContentManagerClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UploadProvider:
    """Upload proxy provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings: Settings = container.get(Settings)
        
        # Shared across requests; each upload opens its own HTTP client
        if not container.has(ContentManagerClient):
            container.register_singleton(
                ContentManagerClient,
                ContentManagerClient(
                    base_url=settings.content_manager_url,
                    timeout=settings.upload_timeout_seconds,
                )
            )
        
        container.register_factory(
            UploadFileUseCase,
            lambda: UploadFileUseCase(
                content_manager_client=container.get(ContentManagerClient)
            )
        )
