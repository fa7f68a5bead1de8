"""
Note schemas.

These schemas define the API contracts for note CRUD operations. Text fields
are sanitized on the way in and again on the way out, so rows written by other
tools are rendered safely too.
"""

from datetime import datetime
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..sanitize import sanitize_html
from .common import MAX_ID, MIN_ID, CreateSchema, UpdateSchema, format_timestamp, to_utc


class NoteCreate(CreateSchema):
    """Note creation request schema."""

    required_fields: ClassVar[Tuple[str, ...]] = ("name", "modified", "folder_id", "content")

    name: str = Field(description="Note name")
    modified: datetime = Field(description="Last modification time")
    folder_id: int = Field(ge=MIN_ID, le=MAX_ID, description="Folder the note is filed under")
    content: str = Field(description="Note content, limited HTML allowed")

    @field_validator("name", "content")
    @classmethod
    def sanitize_text(cls, v):
        return sanitize_html(v)

    @field_validator("modified")
    @classmethod
    def normalize_modified(cls, v):
        return to_utc(v)

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Dogs",
                "modified": "2018-08-15T17:00:00.000Z",
                "folder_id": 1,
                "content": "This is a test note. Note number one.",
            }
        },
    )


class NoteUpdate(UpdateSchema):
    """Note partial update request schema."""

    mutable_fields: ClassVar[Tuple[str, ...]] = ("name", "folder_id", "content")
    empty_message: ClassVar[str] = (
        "Request body must contain either 'name', 'folder_id', 'content'"
    )

    name: Optional[str] = Field(default=None, description="Note name")
    folder_id: Optional[int] = Field(default=None, ge=MIN_ID, le=MAX_ID, description="Folder id")
    content: Optional[str] = Field(default=None, description="Note content")

    @field_validator("name", "content")
    @classmethod
    def sanitize_text(cls, v):
        return sanitize_html(v)

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"name": "updated note name"}},
    )


class NoteResponse(BaseModel):
    """Note response schema."""

    id: int = Field(description="Note unique identifier")
    name: str = Field(description="Note name")
    modified: datetime = Field(description="Last modification time")
    folder_id: int = Field(description="Folder id")
    content: str = Field(description="Note content")

    @field_validator("name", "content")
    @classmethod
    def sanitize_text(cls, v):
        return sanitize_html(v)

    @field_serializer("modified")
    def serialize_modified(self, value: datetime) -> str:
        return format_timestamp(value)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Dogs",
                "modified": "2018-08-15T17:00:00.000Z",
                "folder_id": 1,
                "content": "This is a test note. Note number one.",
            }
        },
    )
