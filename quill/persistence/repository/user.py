"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import select

from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId, Username
from quill.persistence.mappers import row_to_user, user_to_dict
from quill.persistence.repository.base import PostgresRepository
from quill.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find multiple users by their IDs."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self._execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by (lower-cased) email."""
        stmt = select(users_table).where(users_table.c.email == email.lower())
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Save user (create or update)."""
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self._execute(stmt)
        await self._flush()
        return user
