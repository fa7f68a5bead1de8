# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import folders_router, health_router, notes_router
from .api.errors import register_exception_handlers
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import create_tables, dispose_engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(
        "Starting Noteful API",
        extra={"version": settings.app_version, "environment": settings.environment, "debug": settings.debug},
    )

    if not settings.api_token:
        logger.warning("API_TOKEN is not set; every resource request will be rejected")

    # Allow tests to skip touching the real DB (e.g., when using SQLite in-memory)
    if os.getenv("NOTEFUL_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to NOTEFUL_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    # Shutdown
    logger.info("Shutting down Noteful API")
    await dispose_engine()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.app_name,
    description="Notes and folders API",
    version=settings.app_version,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

# Include routers
app.include_router(notes_router, prefix="/api")
app.include_router(folders_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Basic unprefixed health endpoint for load balancers
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run("noteful.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
