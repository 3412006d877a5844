"""Unit tests for JournalService."""

from uuid import uuid4

import pytest

from quill.domain.error import NotFoundError, ValidationError
from quill.domain.repository import CommentRepository
from quill.domain.service import JournalService
from quill.domain.value import JournalId, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateJournal:
    """Tests for create_journal."""

    @pytest.mark.asyncio
    async def test_create_journal(self, unit_env):
        service = await unit_env.get(JournalService)
        author_id = UserId(uuid4())

        journal = await service.create_journal(author_id, "  Day one ", "Dear diary")

        assert journal.title == "Day one"
        assert journal.content == "Dear diary"
        assert journal.author_id == author_id
        assert await service.journal_exists(journal.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("title", "content"),
        [(None, "Body"), ("Title", None), ("   ", "Body"), ("Title", "")],
    )
    async def test_title_and_content_required(self, unit_env, title, content):
        service = await unit_env.get(JournalService)

        with pytest.raises(ValidationError, match="Title and content required"):
            await service.create_journal(UserId(uuid4()), title, content)

    @pytest.mark.asyncio
    async def test_title_too_long(self, unit_env):
        service = await unit_env.get(JournalService)

        with pytest.raises(ValidationError, match="at most 200"):
            await service.create_journal(UserId(uuid4()), "t" * 201, "Body")


class TestOwnership:
    """Reads and writes are scoped to the owner."""

    @pytest.mark.asyncio
    async def test_list_only_own_journals(self, unit_env):
        service = await unit_env.get(JournalService)
        me, other = UserId(uuid4()), UserId(uuid4())
        mine = await service.create_journal(me, "Mine", "Body")
        await service.create_journal(other, "Theirs", "Body")

        journals = await service.list_journals(me)

        assert [j.id for j in journals] == [mine.id]

    @pytest.mark.asyncio
    async def test_other_users_journal_is_not_found(self, unit_env):
        service = await unit_env.get(JournalService)
        journal = await service.create_journal(UserId(uuid4()), "Private", "Body")

        with pytest.raises(NotFoundError):
            await service.get_owned_journal(journal.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_journal_exists_ignores_owner(self, unit_env):
        service = await unit_env.get(JournalService)
        journal = await service.create_journal(UserId(uuid4()), "Private", "Body")

        assert await service.journal_exists(journal.id) is True
        assert await service.journal_exists(JournalId(uuid4())) is False


class TestUpdateJournal:
    """Tests for update_journal."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        service = await unit_env.get(JournalService)
        author_id = UserId(uuid4())
        journal = await service.create_journal(author_id, "Old title", "Old body")

        updated = await service.update_journal(journal.id, author_id, title="New")

        assert updated.title == "New"
        assert updated.content == "Old body"
        assert updated.updated_at >= journal.updated_at

    @pytest.mark.asyncio
    async def test_empty_title_is_rejected(self, unit_env):
        service = await unit_env.get(JournalService)
        author_id = UserId(uuid4())
        journal = await service.create_journal(author_id, "Title", "Body")

        with pytest.raises(ValidationError, match="Title is required"):
            await service.update_journal(journal.id, author_id, title="  ")

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        service = await unit_env.get(JournalService)
        journal = await service.create_journal(UserId(uuid4()), "Title", "Body")

        with pytest.raises(NotFoundError):
            await service.update_journal(journal.id, UserId(uuid4()), title="Mine now")


class TestDeleteJournal:
    """Tests for delete_journal."""

    @pytest.mark.asyncio
    async def test_delete_removes_comments(self, unit_env):
        # Arrange
        service = await unit_env.get(JournalService)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())
        journal = await service.create_journal(author_id, "Title", "Body")
        parent = await comment_repo.save(make_comment(journal.id, author_id))
        await comment_repo.save(
            make_comment(journal.id, author_id, "Reply", parent_id=parent.id)
        )

        # Act
        comments_deleted = await service.delete_journal(journal.id, author_id)

        # Assert
        assert comments_deleted == 2
        assert await service.journal_exists(journal.id) is False
        assert await comment_repo.count_by_journal(journal.id) == 0

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        service = await unit_env.get(JournalService)
        journal = await service.create_journal(UserId(uuid4()), "Title", "Body")

        with pytest.raises(NotFoundError):
            await service.delete_journal(journal.id, UserId(uuid4()))

        assert await service.journal_exists(journal.id) is True
