# Standard library imports
import logging
from typing import Optional

# External package imports
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Local application imports
from ...core.config import Settings, get_settings
from .orm_models import Base

logger = logging.getLogger(__name__)


# Global engine instances (singleton pattern)
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def build_database_url(settings: Settings) -> URL:
    """
    Database URL with DATABASE_USER / DATABASE_PASSWORD applied when set
    
    Args:
        settings: Application settings
        
    Returns:
        SQLAlchemy URL object
    """
    url = make_url(settings.database_url)
    if settings.database_user:
        url = url.set(username=settings.database_user)
    if settings.database_password:
        url = url.set(password=settings.database_password)
    return url


def get_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Get the async SQLAlchemy engine (singleton pattern)
    
    Returns:
        AsyncEngine bound to the configured database
    """
    global _engine
    
    if _engine is not None:
        return _engine
    
    settings = settings or get_settings()
    url = build_database_url(settings)
    _engine = create_async_engine(url, echo=settings.database_echo, pool_pre_ping=True)
    logger.info(f"Created database engine for {url.render_as_string(hide_password=True)}")
    return _engine


def get_session_factory(settings: Optional[Settings] = None) -> async_sessionmaker[AsyncSession]:
    """
    Get the session factory used by SQL repositories
    
    Returns:
        async_sessionmaker producing AsyncSession objects
    """
    global _session_factory
    
    if _session_factory is None:
        _session_factory = async_sessionmaker(get_engine(settings), expire_on_commit=False)
    return _session_factory


async def init_database(engine: AsyncEngine) -> None:
    """Create any missing tables"""
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def close_database() -> None:
    """Dispose the engine (call on application shutdown)"""
    global _engine, _session_factory
    
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None
