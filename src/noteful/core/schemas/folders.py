"""Folder schemas."""

from typing import ClassVar, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..sanitize import sanitize_html
from .common import CreateSchema, UpdateSchema


class FolderCreate(CreateSchema):
    """Folder creation request schema."""

    required_fields: ClassVar[Tuple[str, ...]] = ("name",)
    missing_message: ClassVar[str] = "Missing '{field}' in request body"

    name: str = Field(description="Folder name")

    @field_validator("name")
    @classmethod
    def sanitize_name(cls, v):
        return sanitize_html(v)

    model_config = ConfigDict(extra="ignore", json_schema_extra={"example": {"name": "Important"}})


class FolderUpdate(UpdateSchema):
    """Folder partial update request schema."""

    mutable_fields: ClassVar[Tuple[str, ...]] = ("name",)
    empty_message: ClassVar[str] = "Request body must contain 'name'"

    name: str = Field(description="Folder name")

    @field_validator("name")
    @classmethod
    def sanitize_name(cls, v):
        return sanitize_html(v)


class FolderResponse(BaseModel):
    """Folder response schema."""

    id: int = Field(description="Folder unique identifier")
    name: str = Field(description="Folder name")

    @field_validator("name")
    @classmethod
    def sanitize_name(cls, v):
        return sanitize_html(v)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": {"id": 1, "name": "Important"}},
    )
