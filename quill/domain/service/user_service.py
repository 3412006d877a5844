"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from quill.config import AuthSettings
from quill.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from quill.domain.model.user import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId, UserRole, Username
from quill.util.password import hash_password, verify_password

from .base import Service

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class UserService(Service):
    """Domain service for user accounts and credentials."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (password policy, bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    def _check_password(self, password: str | None) -> str:
        if not password or len(password) < self.auth_settings.min_password_length:
            raise ValidationError(
                f"Password must be at least "
                f"{self.auth_settings.min_password_length} characters long"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
            )
        return password

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Register a new user.

        Raises:
            ValidationError: If username, email or password are invalid
            ConflictError: If the email or username is already taken
        """
        email = (email or "").strip().lower()
        with logfire.span("user_service.register", username=username, email=email):
            try:
                handle = Username(root=(username or "").strip())
            except PydanticValidationError as e:
                raise ValidationError(e.errors()[0]["msg"].removeprefix("Value error, "))
            if "@" not in email or len(email) > 255:
                raise ValidationError("A valid email is required")
            self._check_password(password)

            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email", email=email)
                raise ConflictError("Email is already registered")
            if await self.user_repository.find_by_username(handle):
                logfire.warn("Registration with existing username", username=username)
                raise ConflictError("Username is already taken")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=handle,
                email=email,
                password_hash=hash_password(password, self.auth_settings),
                role=role,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check email and password credentials.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        email = (email or "").strip().lower()
        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None or not verify_password(password or "", user.password_hash):
                logfire.warn("Login failed", email=email)
                raise InvalidCredentialsError()
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str
    ) -> User:
        """Replace a user's password after checking the current one.

        Raises:
            NotFoundError: If the user doesn't exist
            InvalidCredentialsError: If the current password is wrong
            ValidationError: If the new password is too short
        """
        with logfire.span("user_service.change_password", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise NotFoundError("User", str(user_id))
            if not verify_password(current_password or "", user.password_hash):
                logfire.warn("Password change with wrong password", user_id=str(user_id))
                raise InvalidCredentialsError("Current password is incorrect")
            self._check_password(new_password)

            updated = user.model_copy(
                update={
                    "password_hash": hash_password(new_password, self.auth_settings),
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Password changed", user_id=str(user_id))
            return saved

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch-load users keyed by ID; missing IDs are absent from the result."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}
