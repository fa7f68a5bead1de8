"""Folders API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import MAX_ID, MIN_ID, ErrorResponse, UnauthorizedResponse
from ..core.schemas.folders import FolderResponse
from ..core.services import FolderService
from ..database import get_db_session
from ..middleware.auth import require_api_token
from .body import read_json_object

router = APIRouter(
    prefix="/folders",
    tags=["folders"],
    dependencies=[Depends(require_api_token)],
    responses={401: {"model": UnauthorizedResponse}},
)


@router.get("", response_model=List[FolderResponse])
@router.get("/", response_model=List[FolderResponse], include_in_schema=False)
async def list_folders(session: AsyncSession = Depends(get_db_session)):
    """List every folder."""
    folder_service = FolderService(session)
    return await folder_service.list_folders()


@router.post(
    "",
    response_model=FolderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
@router.post(
    "/",
    response_model=FolderResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_folder(
    response: Response,
    request: Request,
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new folder."""
    folder_service = FolderService(session)
    folder = await folder_service.create_folder(await read_json_object(request))
    response.headers["Location"] = f"/api/folders/{folder.id}"
    return folder


@router.get("/{folder_id}", response_model=FolderResponse, responses={404: {"model": ErrorResponse}})
async def get_folder(
    folder_id: int = Path(ge=MIN_ID, le=MAX_ID),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific folder."""
    folder_service = FolderService(session)
    return await folder_service.get_folder(folder_id)


@router.patch(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_folder(
    request: Request,
    folder_id: int = Path(ge=MIN_ID, le=MAX_ID),
    session: AsyncSession = Depends(get_db_session),
):
    """Rename a folder."""
    folder_service = FolderService(session)
    await folder_service.update_folder(folder_id, await read_json_object(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_folder(
    folder_id: int = Path(ge=MIN_ID, le=MAX_ID),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a folder and the notes in it."""
    folder_service = FolderService(session)
    await folder_service.delete_folder(folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
