"""Authentication domain service.

Turns bearer tokens into principals and users into tokens.
"""

from uuid import UUID

import logfire

from quill.domain.error import UnauthenticatedError
from quill.domain.model.user import User
from quill.domain.value import UserId
from quill.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService
from .user_service import UserService


class AuthService(Service):
    """Domain service resolving the authenticated principal of a request."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize auth service.

        Args:
            jwt_service: JWT token service
            user_service: User service, used to confirm the user still exists
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    def issue_token(self, user: User) -> str:
        """Create an access token for a user."""
        return self.jwt_service.create_token(str(user.id), str(user.username))

    async def resolve_principal(self, token: str | None) -> User:
        """Verify a bearer token and load the user it names.

        Args:
            token: Raw token (without the "Bearer " prefix), or None

        Returns:
            The authenticated user

        Raises:
            UnauthenticatedError: If the token is missing, invalid, expired,
                or refers to a user that no longer exists
        """
        if not token:
            raise UnauthenticatedError("Not authorized, no token")

        try:
            payload = self.jwt_service.verify_token(token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError):
            raise UnauthenticatedError("Not authorized, token failed")

        user = await self.user_service.get_user_by_id(user_id)
        if user is None:
            logfire.warn("Token for unknown user", user_id=str(user_id))
            raise UnauthenticatedError("Not authorized, user not found")
        return user
