"""
Shared schemas - error bodies, health, validation helpers
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic_core import PydanticCustomError

# ids and folder references are 32-bit integer columns
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def is_blank(value: Any) -> bool:
    """Absent, null and whitespace-only strings all count as not supplied."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def to_utc(value: datetime) -> datetime:
    # naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render as ``2018-08-15T17:00:00.000Z``."""
    return to_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def first_error_message(exc: ValidationError) -> str:
    """Collapse a pydantic ValidationError into one client facing message."""
    error = exc.errors()[0]
    if error["type"] in ("missing_field", "empty_update"):
        return error["msg"]
    field = ".".join(str(part) for part in error["loc"])
    if not field:
        return error["msg"]
    return f"Invalid '{field}': {error['msg']}"


class CreateSchema(BaseModel):
    """Base for create payloads.

    Required fields are checked in ``required_fields`` order before any type
    validation, so the first missing one is always the one reported.
    """

    model_config = ConfigDict(extra="ignore")

    required_fields: ClassVar[Tuple[str, ...]] = ()
    missing_message: ClassVar[str] = "'{field}' is required"

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for field in cls.required_fields:
                if is_blank(data.get(field)):
                    raise PydanticCustomError(
                        "missing_field", cls.missing_message, {"field": field}
                    )
        return data


class UpdateSchema(BaseModel):
    """Base for partial update payloads.

    Unknown keys, nulls and empty strings are dropped; what is left must name
    at least one of ``mutable_fields``.
    """

    model_config = ConfigDict(extra="ignore")

    mutable_fields: ClassVar[Tuple[str, ...]] = ()
    empty_message: ClassVar[str] = ""

    @model_validator(mode="before")
    @classmethod
    def keep_supplied(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        supplied = {
            key: data[key] for key in cls.mutable_fields if not is_blank(data.get(key))
        }
        if not supplied:
            raise PydanticCustomError("empty_update", cls.empty_message)
        return supplied

    def changes(self) -> Dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class ErrorMessage(BaseModel):
    message: str = Field(description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Error body for 400/404 responses."""

    error: ErrorMessage

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": {"message": "Note Not Found"}}}
    )


class UnauthorizedResponse(BaseModel):
    """Error body for 401 responses, flat for older clients."""

    error: str

    model_config = ConfigDict(json_schema_extra={"example": {"error": "Unauthorized request"}})


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")
    environment: Optional[str] = Field(default=None)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {"database": {"status": "healthy", "response_time_ms": 15}},
            }
        }
    )
