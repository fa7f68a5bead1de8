"""Turn raw request bodies into validated schemas."""

from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel, ValidationError

from ..logging import get_logger
from ..schemas.common import first_error_message

SchemaT = TypeVar("SchemaT", bound=BaseModel)

logger = get_logger("validation")


def parse_payload(schema: Type[SchemaT], payload: Optional[Dict[str, Any]]) -> SchemaT:
    """Validate ``payload`` against ``schema`` or raise a 400."""
    try:
        return schema.model_validate(payload if payload is not None else {})
    except ValidationError as e:
        message = first_error_message(e)
        logger.info("Rejected %s payload: %s", schema.__name__, message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
