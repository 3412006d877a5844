"""Login use case."""

from pydantic import BaseModel

from quill.application.usecase.auth.register import AuthResponse
from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import UserItem
from quill.domain.service import AuthService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginUseCase(BaseUseCase[LoginRequest, AuthResponse]):
    """Use case for email and password login."""

    def __init__(self, user_service: UserService, auth_service: AuthService) -> None:
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Unknown email and wrong password fail identically.

        Raises:
            InvalidCredentialsError: If the credentials don't match a user
        """
        user = await self.user_service.authenticate(
            email=request.email or "",
            password=request.password or "",
        )
        return AuthResponse(
            message="Login successful",
            user=UserItem.from_user(user),
            token=self.auth_service.issue_token(user),
        )
