"""In-memory user repository for testing."""

from typing import Optional

from quill.domain.model.user import User
from quill.domain.repository.user import UserRepository
from quill.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find multiple users by their IDs."""
        return [self._users[u] for u in user_ids if u in self._users]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        email = email.lower()
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
