"""Journal repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.journal import Journal
from quill.domain.value import JournalId, UserId


class JournalRepository(ABC):
    """Repository for Journal aggregate.

    Defines the contract for journal persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, journal_id: JournalId) -> Optional[Journal]:
        """Find a journal by ID.

        Args:
            journal_id: The journal's unique identifier

        Returns:
            The journal if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_and_author(
        self, journal_id: JournalId, author_id: UserId
    ) -> Optional[Journal]:
        """Find a journal by ID that is owned by the given author.

        Args:
            journal_id: The journal's unique identifier
            author_id: The expected author

        Returns:
            The journal if it exists and belongs to the author, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, journal_ids: List[JournalId]) -> List[Journal]:
        """Find all journals with the given IDs (missing IDs are skipped).

        Args:
            journal_ids: Journal IDs to look up

        Returns:
            Journals that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Journal]:
        """Find journals written by an author, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            Journals ordered by created_at descending
        """
        pass

    @abstractmethod
    async def exists(self, journal_id: JournalId) -> bool:
        """Check whether a journal exists.

        Args:
            journal_id: The journal ID

        Returns:
            True if the journal exists
        """
        pass

    @abstractmethod
    async def save(self, journal: Journal) -> Journal:
        """Save a journal (create or update).

        Args:
            journal: The journal to save

        Returns:
            The saved journal
        """
        pass

    @abstractmethod
    async def delete(self, journal_id: JournalId) -> bool:
        """Delete a journal (hard delete).

        Args:
            journal_id: The journal ID to delete

        Returns:
            True if a journal was deleted, False if none existed
        """
        pass
