"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from quill.application.usecase.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from quill.application.usecase.common import ApiModel, MessageResponse
from quill.domain.service import AuthService
from quill.interface.api.security import BearerCredentials, current_user

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(ApiModel):
    """API request for registering."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginAPIRequest(ApiModel):
    """API request for logging in."""

    email: str | None = None
    password: str | None = None


class ChangePasswordAPIRequest(ApiModel):
    """API request for changing the caller's password."""

    current_password: str | None = None
    new_password: str | None = None


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return a bearer token."""
    return await register_use_case.execute(
        RegisterRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    return await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )


@router.put("/change-password", response_model=MessageResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    auth_service: FromDishka[AuthService],
    credentials: BearerCredentials,
) -> MessageResponse:
    """Change the authenticated user's password.

    Requires authentication and the current password.
    """
    user = await current_user(auth_service, credentials)
    return await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=str(user.id),
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )
