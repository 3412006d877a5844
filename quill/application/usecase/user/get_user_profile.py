"""Get user profile use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.application.usecase.common import ApiModel, UserItem
from quill.domain.error import NotFoundError
from quill.domain.service import UserService
from quill.domain.value import parse_user_id


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # User ID from authenticated user


class GetUserProfileResponse(ApiModel):
    """Get user profile response."""

    user: UserItem


class GetUserProfileUseCase(BaseUseCase[GetUserProfileRequest, GetUserProfileResponse]):
    """Use case for reading the caller's own profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user_id = parse_user_id(request.user_id)
        user = await self.user_service.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return GetUserProfileResponse(user=UserItem.from_user(user))
