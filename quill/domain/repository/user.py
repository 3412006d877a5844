"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.user import User
from quill.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find all users with the given IDs (missing IDs are skipped).

        Args:
            user_ids: User IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address (lower-cased)

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
