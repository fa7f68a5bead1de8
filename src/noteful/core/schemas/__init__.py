"""
Pydantic schemas for validating and documenting API requests and responses.

Each operation validates through its own schema: ``*Create`` for POST bodies,
``*Update`` for PATCH bodies, ``*Response`` for what goes back out.
"""

from .common import ErrorResponse, HealthCheckResponse, UnauthorizedResponse, first_error_message
from .folders import FolderCreate, FolderResponse, FolderUpdate
from .notes import NoteCreate, NoteResponse, NoteUpdate

__all__ = [
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    # Folder schemas
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    # Common schemas
    "ErrorResponse",
    "UnauthorizedResponse",
    "HealthCheckResponse",
    "first_error_message",
]
