"""Bearer token authentication for routes."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from quill.domain.model import User
from quill.domain.service import AuthService

# auto_error=False so a missing header reaches AuthService and gets its message
bearer_scheme = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[
    HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
]


async def current_user(
    auth_service: AuthService, credentials: HTTPAuthorizationCredentials | None
) -> User:
    """Resolve the authenticated user from `Authorization: Bearer <token>`.

    Raises:
        UnauthenticatedError: If the token is missing, invalid, expired, or
            belongs to a user that no longer exists
    """
    token = credentials.credentials if credentials else None
    return await auth_service.resolve_principal(token)
