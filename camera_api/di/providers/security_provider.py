from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import PasswordHasher, TokenService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the process-wide password hasher and token service"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings: Settings = container.get(Settings)
        
        container.register_singleton(
            PasswordHasher,
            PasswordHasher(rounds=settings.bcrypt_rounds)
        )
        
        container.register_singleton(
            TokenService,
            TokenService(
                secret_key=settings.jwt_secret_key,
                ttl_seconds=settings.jwt_ttl_seconds,
                algorithm=settings.jwt_algorithm,
            )
        )
