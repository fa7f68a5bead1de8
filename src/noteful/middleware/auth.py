"""Authentication middleware."""

import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings, get_settings
from ..core.logging import get_logger

logger = get_logger("auth")

UNAUTHORIZED_MESSAGE = "Unauthorized request"


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


def token_matches(candidate: Optional[str], expected: Optional[str]) -> bool:
    """Constant time compare; an unset token never matches."""
    if not candidate or not expected:
        return False
    return secrets.compare_digest(candidate.encode(), expected.encode())


class APITokenBearer(HTTPBearer):
    """Shared-secret Bearer token authentication.

    Every caller presents the same ``API_TOKEN``; there is no per-user identity.
    """

    def __init__(self):
        # we raise our own 401 instead of HTTPBearer's default error
        super().__init__(auto_error=False)

    async def __call__(
        self, request: Request, settings: Settings = Depends(get_settings)
    ) -> str:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)

        if credentials is None or not token_matches(credentials.credentials, settings.api_token):
            logger.warning(
                "Unauthorized request",
                extra={"method": request.method, "path": request.url.path},
            )
            raise _unauthorized()

        return credentials.credentials


api_token_bearer = APITokenBearer()


# Dependency guarding every resource router
async def require_api_token(token: str = Depends(api_token_bearer)) -> str:
    """Reject the request unless it carries the configured API token."""
    return token
