"""Register use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import ApiModel, UserItem
from quill.domain.service import AuthService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


class AuthResponse(ApiModel):
    """Response carrying the user and a fresh bearer token."""

    message: str
    user: UserItem
    token: str


class RegisterUseCase(BaseUseCase[RegisterRequest, AuthResponse]):
    """Use case for creating an account with email and password."""

    def __init__(self, user_service: UserService, auth_service: AuthService) -> None:
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Raises:
            ValidationError: If username, email or password are invalid
            ConflictError: If the email or username is already taken
        """
        user = await self.user_service.register(
            username=request.username or "",
            email=request.email or "",
            password=request.password or "",
        )
        return AuthResponse(
            message="User registered successfully",
            user=UserItem.from_user(user),
            token=self.auth_service.issue_token(user),
        )
