"""Request body decoding for the resource routers.

Bodies are read inside the handler, after the router dependencies (the token
check) have run, so an unauthenticated request never reaches JSON decoding.
"""

import json
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status

MALFORMED_BODY_MESSAGE = "Malformed JSON body"
NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"


async def read_json_object(request: Request) -> Optional[Dict[str, Any]]:
    """Decode the body as a JSON object; an empty body is ``None``."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        payload = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MALFORMED_BODY_MESSAGE)
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NOT_AN_OBJECT_MESSAGE)
    return payload
