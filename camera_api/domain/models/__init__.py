from .user import User
from .camera import Camera, normalize_camera_name
from .principal import (
    EndUserPrincipal,
    InternalServicePrincipal,
    Principal,
    INTERNAL_SERVICE_LABEL,
)

__all__ = [
    "User",
    "Camera",
    "normalize_camera_name",
    "EndUserPrincipal",
    "InternalServicePrincipal",
    "Principal",
    "INTERNAL_SERVICE_LABEL",
]
