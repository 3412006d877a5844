"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Callable, Iterable, Optional

from quill.domain.model.comment import Comment
from quill.domain.repository.comment import CommentRepository
from quill.domain.value import CommentId, JournalId, UserId


def _ordered(
    comments: Iterable[Comment],
    newest_first: bool,
) -> list[Comment]:
    # Insertion order breaks created_at ties
    indexed = list(enumerate(comments))
    indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=newest_first)
    return [comment for _, comment in indexed]


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _select(self, predicate: Callable[[Comment], bool]) -> list[Comment]:
        return [c for c in self._comments.values() if predicate(c)]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_id_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID owned by author_id."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.author_id != author_id:
            return None
        return comment

    async def find_by_journal(
        self,
        journal_id: JournalId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find top-level comments of a journal, newest first."""
        comments = self._select(
            lambda c: c.journal_id == journal_id and c.parent_id is None
        )
        return _ordered(comments, newest_first=True)[offset : offset + limit]

    async def count_by_journal(self, journal_id: JournalId) -> int:
        """Count top-level comments of a journal."""
        return sum(
            1
            for c in self._comments.values()
            if c.journal_id == journal_id and c.parent_id is None
        )

    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment, oldest first."""
        return _ordered(
            self._select(lambda c: c.parent_id == parent_id), newest_first=False
        )

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments by a specific author, newest first."""
        comments = self._select(lambda c: c.author_id == author_id)
        return _ordered(comments, newest_first=True)[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count comments by a specific author."""
        return sum(1 for c in self._comments.values() if c.author_id == author_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self,
        comment_id: CommentId,
        author_id: UserId,
        content: str,
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace the content of a comment owned by author_id."""
        comment = await self.find_by_id_and_author(comment_id, author_id)
        if comment is None:
            return None
        updated = comment.edit(content, edited_at)
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_parent(self, parent_id: CommentId) -> int:
        """Delete direct replies to a comment."""
        doomed = [c.id for c in self._select(lambda c: c.parent_id == parent_id)]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def delete_by_journal(self, journal_id: JournalId) -> int:
        """Delete every comment of a journal."""
        doomed = [c.id for c in self._select(lambda c: c.journal_id == journal_id)]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
