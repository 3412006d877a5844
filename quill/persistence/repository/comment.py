"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select, update

from quill.domain.model import Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, JournalId, UserId
from quill.persistence.mappers import comment_to_dict, row_to_comment
from quill.persistence.repository.base import PostgresRepository
from quill.persistence.tables import comments_table


class PostgresCommentRepository(PostgresRepository, CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_id_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID and author in one query."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.author_id == author_id)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_journal(
        self,
        journal_id: JournalId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a journal, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.journal_id == journal_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_journal(self, journal_id: JournalId) -> int:
        """Count top-level comments of a journal."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.journal_id == journal_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def find_replies(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments by a specific author."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count comments by a specific author."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.author_id == author_id)
        )
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self._execute(stmt)
        await self._flush()
        return comment

    async def update_content(
        self,
        comment_id: CommentId,
        author_id: UserId,
        content: str,
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace the content of a comment owned by author_id."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.author_id == author_id)
            .values(
                content=content,
                is_edited=True,
                edited_at=edited_at,
                updated_at=edited_at,
            )
            .returning(comments_table)
        )

        result = await self._execute(stmt)
        row = result.fetchone()

        if row is None:
            # Missing or owned by someone else
            return None

        await self._flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount > 0

    async def delete_by_parent(self, parent_id: CommentId) -> int:
        """Delete direct replies to a comment."""
        stmt = comments_table.delete().where(comments_table.c.parent_id == parent_id)
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount

    async def delete_by_journal(self, journal_id: JournalId) -> int:
        """Delete every comment of a journal."""
        stmt = comments_table.delete().where(comments_table.c.journal_id == journal_id)
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount
