from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse, UserUpdateRequest
from .camera_dto import (
    CameraCreateRequest,
    CameraUpdateRequest,
    CameraResponse,
)
from .error_dto import ErrorResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "UserUpdateRequest",
    "CameraCreateRequest",
    "CameraUpdateRequest",
    "CameraResponse",
    "ErrorResponse",
]
