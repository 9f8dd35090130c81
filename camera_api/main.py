# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, user_router, camera_router, upload_router
from .api.auth_gate import AuthGateMiddleware
from .api.error_handlers import register_error_handlers
from .application.use_cases.auth.seed_admin_user import SeedAdminUserUseCase
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.db.sql_connection import init_database, close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Creates the schema (SQL backend), seeds the admin user when the user
    table is empty, and disposes the database engine on shutdown.
    """
    container = get_container()
    
    if container.has("database_engine"):
        await init_database(container.get("database_engine"))
    
    await container.get(SeedAdminUserUseCase).execute()
    logger.info("Application startup complete")
    
    yield
    
    if container.has("database_engine"):
        await close_database()
    logger.info("Application shutdown complete")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging, CORS and auth gate middleware
    - Domain error handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    configure_logging(settings.log_level)
    
    application = FastAPI(
        title="Camera Management API",
        version="1.0.0",
        description="Users, cameras and media uploads behind bearer-token authentication",
        lifespan=lifespan
    )
    
    # Middleware added last runs first: CORS wraps the auth gate
    application.add_middleware(AuthGateMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    # Register API routers
    application.include_router(auth_router, prefix="/api/auth")
    application.include_router(user_router, prefix="/api/users")
    application.include_router(camera_router, prefix="/api/cameras")
    application.include_router(upload_router, prefix="/api/upload")
    
    @application.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok"}
    
    return application


# Create application instance
app = create_application()
