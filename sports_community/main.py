# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api import pages_router, users_router, posts_router, users_api_router, posts_api_router
from .api.error_handlers import register_exception_handlers
from .api.method_override import MethodOverrideMiddleware
from .core.config import get_settings
from .di.container import reset_container
from .infrastructure.db.mongo_connection import connect_database, close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Opens the process-wide MongoDB connection (and its unique email index)
    at startup and closes it at shutdown. An unreachable database is logged
    but does not stop the server from starting.
    """
    try:
        await connect_database()
    except Exception as e:
        logger.error(f"Failed to initialize MongoDB connection: {e}", exc_info=True)
    
    yield
    
    close_database()
    # Cached repositories hold collections of the closed client
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Method-override middleware for HTML forms
    - Exception handlers for store failures
    - HTML and JSON route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    application = FastAPI(
        title="Sports Community",
        version="1.0.0",
        description="Users and their posts, as HTML forms and a JSON API",
        lifespan=lifespan
    )
    
    application.add_middleware(MethodOverrideMiddleware)
    register_exception_handlers(application)
    
    # Register routers
    application.include_router(pages_router)
    application.include_router(users_router, prefix="/users")
    application.include_router(posts_router, prefix="/posts")
    application.include_router(users_api_router, prefix="/api/users")
    application.include_router(posts_api_router, prefix="/api/posts")
    
    return application


def run() -> None:
    """Console entry point: configure logging and serve the app with uvicorn"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


# Create application instance
app = create_application()


if __name__ == "__main__":
    run()
