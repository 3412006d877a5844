"""Change password use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import MessageResponse
from quill.domain.service import UserService
from quill.domain.value import parse_user_id


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # User ID from authenticated user
    current_password: str | None = None
    new_password: str | None = None


class ChangePasswordUseCase(BaseUseCase[ChangePasswordRequest, MessageResponse]):
    """Use case for changing one's own password."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> MessageResponse:
        """Execute change password flow.

        Raises:
            InvalidCredentialsError: If the current password is wrong
            ValidationError: If the new password is too short
        """
        await self.user_service.change_password(
            parse_user_id(request.user_id),
            current_password=request.current_password or "",
            new_password=request.new_password or "",
        )
        return MessageResponse(message="Password changed successfully")
