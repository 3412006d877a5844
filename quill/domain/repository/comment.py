"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from quill.domain.model.comment import Comment
from quill.domain.value import CommentId, JournalId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID that is owned by the given author.

        Must be a single lookup on both columns so that a missing comment
        and a comment owned by someone else are indistinguishable.

        Args:
            comment_id: The comment's unique identifier
            author_id: The expected author

        Returns:
            The comment if it exists and belongs to the author, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_journal(
        self,
        journal_id: JournalId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a journal, newest first.

        Args:
            journal_id: The journal ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Top-level comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_by_journal(self, journal_id: JournalId) -> int:
        """Count top-level comments of a journal (replies are not counted).

        Args:
            journal_id: The journal ID

        Returns:
            Number of top-level comments
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, oldest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            Replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments written by an author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comments (top-level and replies) ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count comments written by an author.

        Args:
            author_id: The author's user ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        comment_id: CommentId,
        author_id: UserId,
        content: str,
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace a comment's content and mark it edited.

        Matches on both ID and author in one statement, so a comment owned
        by someone else is treated exactly like a missing one.

        Args:
            comment_id: ID of the comment to update
            author_id: The expected author
            content: New (already trimmed) content
            edited_at: Timestamp used for edited_at and updated_at

        Returns:
            Updated comment, or None if no comment matches both ID and author
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Deleting an absent comment is not an error.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_parent(self, parent_id: CommentId) -> int:
        """Delete all direct replies to a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Number of replies deleted
        """
        pass

    @abstractmethod
    async def delete_by_journal(self, journal_id: JournalId) -> int:
        """Delete every comment of a journal.

        Args:
            journal_id: The journal ID

        Returns:
            Number of comments deleted
        """
        pass
