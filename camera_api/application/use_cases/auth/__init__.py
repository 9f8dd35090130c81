from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase
from .authenticate_request import AuthenticateRequestUseCase
from .seed_admin_user import SeedAdminUserUseCase

__all__ = [
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "AuthenticateRequestUseCase",
    "SeedAdminUserUseCase",
]
