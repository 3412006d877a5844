"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.error import StoreError


class PostgresRepository:
    """Base class holding the request-scoped session.

    Every statement goes through `_execute`, so driver and SQL failures
    surface to the domain as StoreError instead of SQLAlchemy exceptions.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Any) -> Result[Any]:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error(
                "Database statement failed",
                repository=type(self).__name__,
                error=str(e),
            )
            raise StoreError(f"Database error in {type(self).__name__}") from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            logfire.error(
                "Database flush failed",
                repository=type(self).__name__,
                error=str(e),
            )
            raise StoreError(f"Database error in {type(self).__name__}") from e
