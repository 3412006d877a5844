"""Comment domain service.

Owns every comment mutation: creation with parent validation, edits and
deletes restricted to the author, and the reply cascade on delete.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from quill.domain.error import (
    NotFoundError,
    NotFoundOrForbiddenError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
)
from quill.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, JournalId, UserId, clean_text

from .base import Service
from .journal_service import JournalService


def _clean_content(content: str | None) -> str:
    text = clean_text(content, "Comment content")
    if len(text) > MAX_CONTENT_LENGTH:
        raise ValidationError(
            f"Comment content must be at most {MAX_CONTENT_LENGTH} characters"
        )
    return text


@dataclass(frozen=True)
class CommentDeletion:
    """Outcome of deleting a comment.

    cascade_complete is False when the comment itself was removed but its
    replies could not be; those replies are left orphaned.
    """

    comment_id: CommentId
    replies_deleted: int
    cascade_complete: bool


class CommentService(Service):
    """Domain service for comment lifecycle operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        journal_service: JournalService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            journal_service: Journal service, used for existence checks
        """
        self.comment_repository = comment_repository
        self.journal_service = journal_service

    async def create_comment(
        self,
        principal_id: UserId | None,
        journal_id: JournalId,
        content: str | None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment on a journal or a reply to one.

        Args:
            principal_id: Authenticated user creating the comment
            journal_id: Journal the comment belongs to
            content: Comment text (trimmed before storing)
            parent_id: Top-level comment being replied to (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty, or the parent belongs to
                another journal or is itself a reply
            UnauthenticatedError: If there is no principal
            NotFoundError: If the journal or the parent comment doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            journal_id=str(journal_id),
            author_id=str(principal_id) if principal_id else None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = _clean_content(content)

            if principal_id is None:
                raise UnauthenticatedError()

            if not await self.journal_service.journal_exists(journal_id):
                logfire.warn("Journal not found for comment", journal_id=str(journal_id))
                raise NotFoundError("Journal", str(journal_id))

            if parent_id:
                await self._check_parent(parent_id, journal_id)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                journal_id=journal_id,
                author_id=principal_id,
                content=text,
                parent_id=parent_id,
                is_edited=False,
                edited_at=None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                journal_id=str(journal_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def _check_parent(self, parent_id: CommentId, journal_id: JournalId) -> None:
        """Validate that a reply target exists, shares the journal and is top-level."""
        parent = await self.comment_repository.find_by_id(parent_id)
        if not parent:
            logfire.warn(
                "Parent comment not found",
                parent_id=str(parent_id),
                journal_id=str(journal_id),
            )
            raise NotFoundError("Parent comment", str(parent_id))
        if parent.journal_id != journal_id:
            logfire.warn(
                "Parent comment does not belong to journal",
                parent_id=str(parent_id),
                parent_journal_id=str(parent.journal_id),
                target_journal_id=str(journal_id),
            )
            raise ValidationError("Invalid parent comment")
        if parent.is_reply:
            logfire.warn("Attempt to reply to a reply", parent_id=str(parent_id))
            raise ValidationError("Replies cannot be nested more than one level")

    async def update_comment(
        self,
        principal_id: UserId | None,
        comment_id: CommentId,
        content: str | None,
    ) -> Comment:
        """Edit the content of a comment owned by the principal.

        Args:
            principal_id: Authenticated user editing the comment
            comment_id: Comment to edit
            content: New comment text (trimmed before storing)

        Returns:
            Updated comment with is_edited set

        Raises:
            ValidationError: If content is empty
            UnauthenticatedError: If there is no principal
            NotFoundOrForbiddenError: If the comment doesn't exist or isn't
                owned by the principal
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            author_id=str(principal_id) if principal_id else None,
        ):
            text = _clean_content(content)

            if principal_id is None:
                raise UnauthenticatedError()

            updated = await self.comment_repository.update_content(
                comment_id=comment_id,
                author_id=principal_id,
                content=text,
                edited_at=datetime.now(),
            )
            if updated is None:
                logfire.warn(
                    "Comment not found or not owned for update",
                    comment_id=str(comment_id),
                )
                raise NotFoundOrForbiddenError("Comment", "edit")

            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                content_length=len(updated.content),
            )
            return updated

    async def delete_comment(
        self,
        principal_id: UserId | None,
        comment_id: CommentId,
    ) -> CommentDeletion:
        """Delete a comment owned by the principal together with its replies.

        Replies are removed first, then the comment. The two steps are
        separate store calls; when the store runs them in one transaction the
        delete is atomic, otherwise a failed cascade leaves orphaned replies
        and is reported through CommentDeletion.cascade_complete.

        Args:
            principal_id: Authenticated user deleting the comment
            comment_id: Comment to delete

        Returns:
            Deletion outcome

        Raises:
            UnauthenticatedError: If there is no principal
            NotFoundOrForbiddenError: If the comment doesn't exist or isn't
                owned by the principal
            StoreError: If the comment itself could not be deleted
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            author_id=str(principal_id) if principal_id else None,
        ):
            if principal_id is None:
                raise UnauthenticatedError()

            comment = await self.comment_repository.find_by_id_and_author(
                comment_id, principal_id
            )
            if comment is None:
                logfire.warn(
                    "Comment not found or not owned for delete",
                    comment_id=str(comment_id),
                )
                raise NotFoundOrForbiddenError("Comment", "delete")

            replies_deleted = 0
            cascade_complete = True
            try:
                replies_deleted = await self.comment_repository.delete_by_parent(
                    comment_id
                )
            except StoreError as e:
                cascade_complete = False
                logfire.error(
                    "Failed to delete replies of comment",
                    comment_id=str(comment_id),
                    error=str(e),
                )

            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                # Removed concurrently between the ownership check and now
                raise NotFoundOrForbiddenError("Comment", "delete")

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                replies_deleted=replies_deleted,
                cascade_complete=cascade_complete,
            )
            return CommentDeletion(
                comment_id=comment_id,
                replies_deleted=replies_deleted,
                cascade_complete=cascade_complete,
            )
