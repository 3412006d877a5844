"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from quill.application.usecase.comment import (
    GetUserCommentsRequest,
    GetUserCommentsResponse,
    GetUserCommentsUseCase,
)
from quill.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from quill.domain.service import AuthService
from quill.interface.api.security import BearerCredentials, current_user

router = APIRouter(prefix="/user", tags=["users"], route_class=DishkaRoute)


@router.get("/profile", response_model=GetUserProfileResponse)
async def get_profile(
    get_profile_use_case: FromDishka[GetUserProfileUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> GetUserProfileResponse:
    """Get the authenticated user's profile."""
    user = await current_user(auth_service, credentials)
    return await get_profile_use_case.execute(
        GetUserProfileRequest(user_id=str(user.id))
    )


@router.get("/comments", response_model=GetUserCommentsResponse)
async def get_my_comments(
    get_user_comments_use_case: FromDishka[GetUserCommentsUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
    page: str | None = None,
    limit: str | None = None,
) -> GetUserCommentsResponse:
    """List the authenticated user's comments, newest first.

    Each comment carries the title of the journal it belongs to.
    """
    user = await current_user(auth_service, credentials)
    return await get_user_comments_use_case.execute(
        GetUserCommentsRequest(user_id=str(user.id), page=page, limit=limit)
    )
