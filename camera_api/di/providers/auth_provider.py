from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import PasswordHasher, TokenService
from ...domain.repositories.user_repository import UserRepository
from ...application.services.credential_verifier import CredentialVerifier
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.authenticate_request import AuthenticateRequestUseCase
from ...application.use_cases.auth.seed_admin_user import SeedAdminUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        settings: Settings = container.get(Settings)
        
        container.register_factory(
            CredentialVerifier,
            lambda: CredentialVerifier(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
            )
        )
        
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
            )
        )
        
        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                credential_verifier=container.get(CredentialVerifier),
                token_service=container.get(TokenService),
            )
        )
        
        container.register_factory(
            AuthenticateRequestUseCase,
            lambda: AuthenticateRequestUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
                internal_api_token=settings.internal_api_token,
                internal_path_prefix=settings.internal_path_prefix,
            )
        )
        
        container.register_factory(
            SeedAdminUserUseCase,
            lambda: SeedAdminUserUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
                admin_password=settings.seed_admin_password,
                admin_name=settings.seed_admin_name,
            )
        )
