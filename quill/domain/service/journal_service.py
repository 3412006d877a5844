"""Journal domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from quill.domain.error import NotFoundError, ValidationError
from quill.domain.model.journal import MAX_TITLE_LENGTH, Journal
from quill.domain.repository import CommentRepository, JournalRepository
from quill.domain.value import JournalId, UserId, clean_text

from .base import Service


def _check_title(title: str) -> str:
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(f"Title must be at most {MAX_TITLE_LENGTH} characters")
    return title


class JournalService(Service):
    """Domain service for journal operations.

    Reads and writes on behalf of a user are scoped to that user's own
    journals; journal_exists answers for any owner.
    """

    def __init__(
        self,
        journal_repository: JournalRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize journal service.

        Args:
            journal_repository: Journal repository
            comment_repository: Comment repository (for cascading deletes)
        """
        self.journal_repository = journal_repository
        self.comment_repository = comment_repository

    async def create_journal(
        self, author_id: UserId, title: str | None, content: str | None
    ) -> Journal:
        """Create a journal entry.

        Raises:
            ValidationError: If title or content is missing
        """
        with logfire.span("journal_service.create_journal", author_id=str(author_id)):
            if not title or not title.strip() or not content or not content.strip():
                raise ValidationError("Title and content required")

            now = datetime.now()
            journal = Journal(
                id=JournalId(uuid4()),
                author_id=author_id,
                title=_check_title(title.strip()),
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.journal_repository.save(journal)
            logfire.info("Journal created", journal_id=str(saved.id))
            return saved

    async def list_journals(self, author_id: UserId) -> list[Journal]:
        """List an author's journals, newest first."""
        with logfire.span("journal_service.list_journals", author_id=str(author_id)):
            journals = await self.journal_repository.find_by_author(author_id)
            logfire.info(
                "Journals listed", author_id=str(author_id), count=len(journals)
            )
            return journals

    async def journal_exists(self, journal_id: JournalId) -> bool:
        """Check that a journal exists, regardless of who owns it."""
        return await self.journal_repository.exists(journal_id)

    async def get_journals_by_ids(
        self, journal_ids: list[JournalId]
    ) -> dict[JournalId, Journal]:
        """Batch-load journals keyed by ID; missing IDs are absent from the result."""
        if not journal_ids:
            return {}
        journals = await self.journal_repository.find_by_ids(list(set(journal_ids)))
        return {journal.id: journal for journal in journals}

    async def get_owned_journal(
        self, journal_id: JournalId, author_id: UserId
    ) -> Journal:
        """Get a journal owned by the author.

        Raises:
            NotFoundError: If the journal doesn't exist or belongs to someone else
        """
        with logfire.span(
            "journal_service.get_owned_journal",
            journal_id=str(journal_id),
            author_id=str(author_id),
        ):
            journal = await self.journal_repository.find_by_id_and_author(
                journal_id, author_id
            )
            if journal is None:
                logfire.warn("Journal not found", journal_id=str(journal_id))
                raise NotFoundError("Journal", str(journal_id))
            return journal

    async def update_journal(
        self,
        journal_id: JournalId,
        author_id: UserId,
        title: str | None = None,
        content: str | None = None,
    ) -> Journal:
        """Update the title and/or content of an owned journal.

        Fields left as None keep their current value.

        Raises:
            NotFoundError: If the journal doesn't exist or belongs to someone else
            ValidationError: If a provided field is empty
        """
        with logfire.span(
            "journal_service.update_journal",
            journal_id=str(journal_id),
            author_id=str(author_id),
        ):
            journal = await self.get_owned_journal(journal_id, author_id)

            changes: dict[str, object] = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = _check_title(clean_text(title, "Title"))
            if content is not None:
                clean_text(content, "Content")
                changes["content"] = content

            saved = await self.journal_repository.save(journal.model_copy(update=changes))
            logfire.info(
                "Journal updated",
                journal_id=str(journal_id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return saved

    async def delete_journal(self, journal_id: JournalId, author_id: UserId) -> int:
        """Delete an owned journal and every comment on it.

        Returns:
            Number of comments deleted along with the journal

        Raises:
            NotFoundError: If the journal doesn't exist or belongs to someone else
        """
        with logfire.span(
            "journal_service.delete_journal",
            journal_id=str(journal_id),
            author_id=str(author_id),
        ):
            await self.get_owned_journal(journal_id, author_id)

            comments_deleted = await self.comment_repository.delete_by_journal(
                journal_id
            )
            if not await self.journal_repository.delete(journal_id):
                raise NotFoundError("Journal", str(journal_id))

            logfire.info(
                "Journal deleted",
                journal_id=str(journal_id),
                comments_deleted=comments_deleted,
            )
            return comments_deleted
