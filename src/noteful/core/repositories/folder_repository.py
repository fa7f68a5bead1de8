"""Folder repository for database operations."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.folder import Folder
from .note_repository import NoteRepository

logger = logging.getLogger(__name__)


class FolderRepository:
    """Repository for folder database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def list_folders(self) -> List[Folder]:
        """All folders in id order."""
        stmt = select(Folder).order_by(Folder.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, folder_id: int) -> Optional[Folder]:
        """Get folder by ID."""
        stmt = select(Folder).where(Folder.id == folder_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_folder(self, folder_data: dict) -> Folder:
        """Create new folder."""
        folder = Folder(**folder_data)
        self.session.add(folder)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self.session.refresh(folder)
        return folder

    async def update_folder(self, folder: Folder, update_data: dict) -> Folder:
        """Merge ``update_data`` onto an already loaded folder."""
        for key, value in update_data.items():
            setattr(folder, key, value)

        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self.session.refresh(folder)
        return folder

    async def delete_folder(self, folder: Folder) -> int:
        """Delete a folder and the notes filed under it in one transaction.

        Returns the number of notes removed along with it.
        """
        try:
            removed = await self.note_repo.delete_by_folder(folder.id)
            await self.session.delete(folder)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed deleting folder {folder.id}: {e}")
            await self.session.rollback()
            raise

        logger.info(f"Deleted folder {folder.id} and {removed} notes")
        return removed
