"""Note service implementation."""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from .interfaces import INoteService
from .validation import parse_payload

logger = get_logger("services.notes")

NOTE_NOT_FOUND = "Note Not Found"


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def list_notes(self) -> List[NoteResponse]:
        """List every note in store order."""
        notes = await self.note_repo.list_notes()
        return [self._note_to_response(note) for note in notes]

    async def get_note(self, note_id: int) -> NoteResponse:
        """Get note by ID."""
        note = await self._get_or_404(note_id)
        return self._note_to_response(note)

    async def create_note(self, payload: Optional[Dict[str, Any]]) -> NoteResponse:
        """Create new note.

        Required fields are checked in order (name, modified, folder_id,
        content) and the first one missing is reported.
        """
        request = parse_payload(NoteCreate, payload)

        note = await self.note_repo.create_note(request.model_dump())
        logger.info(f"Created note {note.id} in folder {note.folder_id}")
        return self._note_to_response(note)

    async def update_note(self, note_id: int, payload: Optional[Dict[str, Any]]) -> None:
        """Merge supplied fields onto an existing note.

        Existence is checked before the body, so an unknown id is a 404 even
        when the body is empty.
        """
        note = await self._get_or_404(note_id)
        request = parse_payload(NoteUpdate, payload)

        update_data = request.changes()
        await self.note_repo.update_note(note, update_data)
        logger.info(f"Updated note {note_id}: {sorted(update_data)}")

    async def delete_note(self, note_id: int) -> None:
        """Delete note."""
        note = await self._get_or_404(note_id)
        await self.note_repo.delete_note(note)
        logger.info(f"Deleted note {note_id}")

    async def _get_or_404(self, note_id: int) -> Note:
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            logger.info(f"Note {note_id} not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOTE_NOT_FOUND)
        return note

    def _note_to_response(self, note: Note) -> NoteResponse:
        """Convert note model to response."""
        return NoteResponse.model_validate(note)
