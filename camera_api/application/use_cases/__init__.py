from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    AuthenticateRequestUseCase,
    SeedAdminUserUseCase,
)
from .user import (
    ListUsersUseCase,
    GetUserUseCase,
    CreateUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from .camera import (
    CreateCameraUseCase,
    ListCamerasUseCase,
    GetCameraUseCase,
    UpdateCameraUseCase,
    DeleteCameraUseCase,
    SearchCamerasUseCase,
)
from .upload import UploadFileUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "AuthenticateRequestUseCase",
    "SeedAdminUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "CreateCameraUseCase",
    "ListCamerasUseCase",
    "GetCameraUseCase",
    "UpdateCameraUseCase",
    "DeleteCameraUseCase",
    "SearchCamerasUseCase",
    "UploadFileUseCase",
]
