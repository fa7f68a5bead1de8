"""API routers for the Noteful API."""

from .folders import router as folders_router
from .health import router as health_router
from .notes import router as notes_router

__all__ = ["notes_router", "folders_router", "health_router"]
