"""
Service layer interfaces and implementations.
"""

from .interfaces import IFolderService, IHealthService, INoteService

from .folder_service import FolderService
from .health_service import HealthService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "INoteService",
    "IFolderService",
    "IHealthService",

    # Implementations
    "NoteService",
    "FolderService",
    "HealthService",
]
