from .content_manager_client import ContentManagerClient

__all__ = ["ContentManagerClient"]
