"""Unit tests for InMemoryCommentRepository ordering and ownership rules."""

from datetime import datetime
from uuid import uuid4

import pytest

from quill.domain.value import JournalId, UserId
from quill.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment


@pytest.fixture
def repo() -> InMemoryCommentRepository:
    return InMemoryCommentRepository()


class TestOrdering:
    """Ties on created_at fall back to insertion order."""

    @pytest.mark.asyncio
    async def test_same_timestamp_keeps_insertion_order(self, repo):
        journal_id, author_id = JournalId(uuid4()), UserId(uuid4())
        stamp = datetime(2024, 1, 1, 12, 0, 0)
        parent = await repo.save(make_comment(journal_id, author_id, created_at=stamp))
        first = await repo.save(
            make_comment(journal_id, author_id, parent_id=parent.id, created_at=stamp)
        )
        second = await repo.save(
            make_comment(journal_id, author_id, parent_id=parent.id, created_at=stamp)
        )

        replies = await repo.find_replies(parent.id)

        assert [r.id for r in replies] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_offset_beyond_end(self, repo):
        journal_id, author_id = JournalId(uuid4()), UserId(uuid4())
        await repo.save(make_comment(journal_id, author_id))

        assert await repo.find_by_journal(journal_id, limit=10, offset=10) == []


class TestOwnedWrites:
    """update_content matches on both ID and author."""

    @pytest.mark.asyncio
    async def test_update_content_by_author(self, repo):
        author_id = UserId(uuid4())
        comment = await repo.save(make_comment(JournalId(uuid4()), author_id))
        now = datetime.now()

        updated = await repo.update_content(comment.id, author_id, "Edited", now)

        assert updated is not None
        assert updated.content == "Edited"
        assert updated.is_edited is True
        assert updated.edited_at == now

    @pytest.mark.asyncio
    async def test_update_content_by_stranger(self, repo):
        comment = await repo.save(make_comment(JournalId(uuid4()), UserId(uuid4())))

        updated = await repo.update_content(
            comment.id, UserId(uuid4()), "Edited", datetime.now()
        )

        assert updated is None
        assert (await repo.find_by_id(comment.id)).content == comment.content

    @pytest.mark.asyncio
    async def test_delete_absent_comment(self, repo):
        comment = make_comment(JournalId(uuid4()), UserId(uuid4()))

        assert await repo.delete(comment.id) is False
