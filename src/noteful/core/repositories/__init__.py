"""Repository layer for data access."""

from .folder_repository import FolderRepository
from .note_repository import NoteRepository

__all__ = [
    "NoteRepository",
    "FolderRepository",
]
