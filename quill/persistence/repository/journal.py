"""PostgreSQL implementation of Journal repository."""

from typing import List, Optional

from sqlalchemy import desc, select

from quill.domain.model import Journal
from quill.domain.repository import JournalRepository
from quill.domain.value import JournalId, UserId
from quill.persistence.mappers import journal_to_dict, row_to_journal
from quill.persistence.repository.base import PostgresRepository
from quill.persistence.tables import journals_table


class PostgresJournalRepository(PostgresRepository, JournalRepository):
    """PostgreSQL implementation of JournalRepository."""

    async def find_by_id(self, journal_id: JournalId) -> Optional[Journal]:
        """Find a journal by ID."""
        stmt = select(journals_table).where(journals_table.c.id == journal_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_journal(row._asdict()) if row else None

    async def find_by_id_and_author(
        self, journal_id: JournalId, author_id: UserId
    ) -> Optional[Journal]:
        """Find a journal by ID and owner in one query."""
        stmt = (
            select(journals_table)
            .where(journals_table.c.id == journal_id)
            .where(journals_table.c.author_id == author_id)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_journal(row._asdict()) if row else None

    async def find_by_ids(self, journal_ids: List[JournalId]) -> List[Journal]:
        """Find multiple journals by their IDs."""
        if not journal_ids:
            return []
        stmt = select(journals_table).where(journals_table.c.id.in_(journal_ids))
        result = await self._execute(stmt)
        return [row_to_journal(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Journal]:
        """Find all journals of an author, newest first."""
        stmt = (
            select(journals_table)
            .where(journals_table.c.author_id == author_id)
            .order_by(desc(journals_table.c.created_at))
        )
        result = await self._execute(stmt)
        return [row_to_journal(row._asdict()) for row in result.fetchall()]

    async def exists(self, journal_id: JournalId) -> bool:
        """Check whether a journal exists."""
        stmt = select(journals_table.c.id).where(journals_table.c.id == journal_id)
        result = await self._execute(stmt)
        return result.fetchone() is not None

    async def save(self, journal: Journal) -> Journal:
        """Save a journal (create or update)."""
        journal_dict = journal_to_dict(journal)
        existing = await self.find_by_id(journal.id)

        if existing:
            stmt = (
                journals_table.update()
                .where(journals_table.c.id == journal.id)
                .values(**journal_dict)
            )
        else:
            stmt = journals_table.insert().values(**journal_dict)

        await self._execute(stmt)
        await self._flush()
        return journal

    async def delete(self, journal_id: JournalId) -> bool:
        """Delete a journal (hard delete)."""
        stmt = journals_table.delete().where(journals_table.c.id == journal_id)
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount > 0
