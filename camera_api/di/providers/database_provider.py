from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.sql_connection import get_engine, get_session_factory

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the engine and session factory in the container.
        Nothing is registered for the in-memory backend.
        """
        settings: Settings = container.get(Settings)
        if settings.storage_backend != "sql":
            return
        
        container.register_singleton("database_engine", get_engine(settings))
        container.register_singleton("session_factory", get_session_factory(settings))
