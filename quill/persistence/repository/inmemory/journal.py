"""In-memory journal repository for testing."""

from typing import Optional

from quill.domain.model.journal import Journal
from quill.domain.repository.journal import JournalRepository
from quill.domain.value import JournalId, UserId


class InMemoryJournalRepository(JournalRepository):
    """In-memory implementation of JournalRepository for testing."""

    def __init__(self) -> None:
        self._journals: dict[JournalId, Journal] = {}

    async def find_by_id(self, journal_id: JournalId) -> Optional[Journal]:
        """Find a journal by ID."""
        return self._journals.get(journal_id)

    async def find_by_id_and_author(
        self, journal_id: JournalId, author_id: UserId
    ) -> Optional[Journal]:
        """Find a journal by ID owned by author_id."""
        journal = self._journals.get(journal_id)
        if journal is None or journal.author_id != author_id:
            return None
        return journal

    async def find_by_ids(self, journal_ids: list[JournalId]) -> list[Journal]:
        """Find multiple journals by their IDs."""
        return [self._journals[j] for j in journal_ids if j in self._journals]

    async def find_by_author(self, author_id: UserId) -> list[Journal]:
        """Find journals of an author, newest first."""
        journals = [j for j in self._journals.values() if j.author_id == author_id]
        indexed = list(enumerate(journals))
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [journal for _, journal in indexed]

    async def exists(self, journal_id: JournalId) -> bool:
        """Check whether a journal exists."""
        return journal_id in self._journals

    async def save(self, journal: Journal) -> Journal:
        """Save or update a journal."""
        self._journals[journal.id] = journal
        return journal

    async def delete(self, journal_id: JournalId) -> bool:
        """Delete a journal."""
        return self._journals.pop(journal_id, None) is not None
