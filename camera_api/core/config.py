# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.database_url: Final[str] = os.getenv(
            "DATABASE_URL", "sqlite+aiosqlite:///./camera_api.db"
        )
        self.database_user: Final[str] = os.getenv("DATABASE_USER", "")
        self.database_password: Final[str] = os.getenv("DATABASE_PASSWORD", "")
        self.database_echo: Final[bool] = _env_bool("DATABASE_ECHO", "false")
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "sql").strip().lower()
        
        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_ttl_seconds: Final[int] = int(os.getenv("JWT_TTL_SECONDS", "3600"))
        
        # Internal service authentication
        self.internal_api_token: Final[str] = os.getenv("INTERNAL_API_TOKEN", "")
        self.internal_path_prefix: Final[str] = os.getenv("INTERNAL_PATH_PREFIX", "/api/cameras")
        
        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))
        
        # Initial data
        self.seed_admin_password: Final[str] = os.getenv("SEED_ADMIN_PASSWORD", "admin")
        self.seed_admin_name: Final[str] = os.getenv("SEED_ADMIN_NAME", "Raul Del Valle")
        
        # Content manager (upload proxy target)
        self.content_manager_url: Final[str] = os.getenv(
            "CONTENT_MANAGER_URL",
            "http://content-manager:8181"
        ).rstrip("/")
        self.upload_timeout_seconds: Final[float] = float(os.getenv("UPLOAD_TIMEOUT_SECONDS", "30"))
        
        # HTTP / logging
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ALLOW_ORIGINS",
                "http://localhost:5173,http://localhost:3000",
            ).split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        if self.jwt_ttl_seconds <= 0:
            raise ValueError("JWT_TTL_SECONDS must be a positive number of seconds")
        if self.storage_backend not in ("sql", "memory"):
            raise ValueError(f"Unsupported STORAGE_BACKEND: {self.storage_backend}")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
