from .sql_connection import (
    build_database_url,
    get_engine,
    get_session_factory,
    init_database,
    close_database,
)
from .sql_user_repository import SqlUserRepository
from .sql_camera_repository import SqlCameraRepository

__all__ = [
    "build_database_url",
    "get_engine",
    "get_session_factory",
    "init_database",
    "close_database",
    "SqlUserRepository",
    "SqlCameraRepository",
]
