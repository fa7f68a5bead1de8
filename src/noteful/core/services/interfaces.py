"""
Service interfaces for the Noteful API.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..schemas.common import HealthCheckResponse
from ..schemas.folders import FolderResponse
from ..schemas.notes import NoteResponse


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    async def list_notes(self) -> List[NoteResponse]:
        """List every note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: int) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def create_note(self, payload: Dict[str, Any]) -> NoteResponse:
        """Validate and create a note."""
        pass

    @abstractmethod
    async def update_note(self, note_id: int, payload: Dict[str, Any]) -> None:
        """Partially update a note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: int) -> None:
        """Delete note."""
        pass


class IFolderService(ABC):
    """Folder service for CRUD operations."""

    @abstractmethod
    async def list_folders(self) -> List[FolderResponse]:
        """List every folder."""
        pass

    @abstractmethod
    async def get_folder(self, folder_id: int) -> FolderResponse:
        """Get folder by ID."""
        pass

    @abstractmethod
    async def create_folder(self, payload: Dict[str, Any]) -> FolderResponse:
        """Validate and create a folder."""
        pass

    @abstractmethod
    async def update_folder(self, folder_id: int, payload: Dict[str, Any]) -> None:
        """Rename a folder."""
        pass

    @abstractmethod
    async def delete_folder(self, folder_id: int) -> None:
        """Delete folder and its notes."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall system health."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check database connectivity."""
        pass
