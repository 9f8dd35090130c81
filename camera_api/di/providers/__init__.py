from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .security_provider import SecurityProvider
from .auth_provider import AuthProvider
from .user_provider import UserProvider
from .camera_provider import CameraProvider
from .upload_provider import UploadProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "SecurityProvider",
    "AuthProvider",
    "UserProvider",
    "CameraProvider",
    "UploadProvider",
]
