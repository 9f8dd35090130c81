from .config import Settings, get_settings, reset_settings
from .security import PasswordHasher, TokenService

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "PasswordHasher",
    "TokenService",
]
