"""Note repository for database operations."""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_notes(self) -> List[Note]:
        """All notes in id order."""
        stmt = select(Note).order_by(Note.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, note_id: int) -> Optional[Note]:
        """Get note by ID."""
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self.session.refresh(note)
        return note

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Merge ``update_data`` onto an already loaded note."""
        for key, value in update_data.items():
            setattr(note, key, value)

        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete a loaded note."""
        try:
            await self.session.delete(note)
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed deleting note {note.id}: {e}")
            await self.session.rollback()
            raise

    async def delete_by_folder(self, folder_id: int) -> int:
        """Remove every note filed under ``folder_id``; caller commits."""
        stmt = delete(Note).where(Note.folder_id == folder_id)
        result = await self.session.execute(stmt)
        return result.rowcount or 0
