"""Notes API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import MAX_ID, MIN_ID, ErrorResponse, UnauthorizedResponse
from ..core.schemas.notes import NoteResponse
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import require_api_token
from .body import read_json_object

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    dependencies=[Depends(require_api_token)],
    responses={401: {"model": UnauthorizedResponse}},
)


@router.get("", response_model=List[NoteResponse])
@router.get("/", response_model=List[NoteResponse], include_in_schema=False)
async def list_notes(session: AsyncSession = Depends(get_db_session)):
    """List every note."""
    note_service = NoteService(session)
    return await note_service.list_notes()


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
@router.post(
    "/",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_note(
    response: Response,
    request: Request,
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    note = await note_service.create_note(await read_json_object(request))
    # existing clients expect the unprefixed path here
    response.headers["Location"] = f"/notes/{note.id}"
    return note


@router.get("/{note_id}", response_model=NoteResponse, responses={404: {"model": ErrorResponse}})
async def get_note(
    note_id: int = Path(ge=MIN_ID, le=MAX_ID),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(note_id)


@router.patch(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_note(
    request: Request,
    note_id: int = Path(ge=MIN_ID, le=MAX_ID),
    session: AsyncSession = Depends(get_db_session),
):
    """Update some fields of a note."""
    note_service = NoteService(session)
    await note_service.update_note(note_id, await read_json_object(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_note(
    note_id: int = Path(ge=MIN_ID, le=MAX_ID),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
