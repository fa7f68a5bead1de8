"""Folder service implementation."""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..models.folder import Folder
from ..repositories.folder_repository import FolderRepository
from ..schemas.folders import FolderCreate, FolderResponse, FolderUpdate
from .interfaces import IFolderService
from .validation import parse_payload

logger = get_logger("services.folders")

FOLDER_NOT_FOUND = "Folder doesn't exist"


class FolderService(IFolderService):
    """Folder service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.folder_repo = FolderRepository(session)

    async def list_folders(self) -> List[FolderResponse]:
        folders = await self.folder_repo.list_folders()
        return [FolderResponse.model_validate(folder) for folder in folders]

    async def get_folder(self, folder_id: int) -> FolderResponse:
        folder = await self._get_or_404(folder_id)
        return FolderResponse.model_validate(folder)

    async def create_folder(self, payload: Optional[Dict[str, Any]]) -> FolderResponse:
        request = parse_payload(FolderCreate, payload)

        folder = await self.folder_repo.create_folder(request.model_dump())
        logger.info(f"Created folder {folder.id}")
        return FolderResponse.model_validate(folder)

    async def update_folder(self, folder_id: int, payload: Optional[Dict[str, Any]]) -> None:
        """Rename a folder; 404 wins over an empty body."""
        folder = await self._get_or_404(folder_id)
        request = parse_payload(FolderUpdate, payload)

        await self.folder_repo.update_folder(folder, request.changes())
        logger.info(f"Updated folder {folder_id}")

    async def delete_folder(self, folder_id: int) -> None:
        """Delete a folder. Notes filed under it go with it."""
        folder = await self._get_or_404(folder_id)
        await self.folder_repo.delete_folder(folder)

    async def _get_or_404(self, folder_id: int) -> Folder:
        folder = await self.folder_repo.get_by_id(folder_id)
        if not folder:
            logger.info(f"Folder {folder_id} not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=FOLDER_NOT_FOUND)
        return folder
