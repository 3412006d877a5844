"""Unit tests for GetJournalCommentsUseCase."""

from uuid import uuid4

import pytest

from quill.application.usecase.comment import (
    GetJournalCommentsRequest,
    GetJournalCommentsUseCase,
)
from quill.domain.error import NotFoundError
from quill.domain.repository import (
    CommentRepository,
    JournalRepository,
    UserRepository,
)
from quill.domain.value import UserId
from tests.conftest import make_comment, make_journal, make_user, minutes_ago
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetJournalCommentsUseCase:
    """Tests for GetJournalCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_threads_with_authors(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetJournalCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        journal = await (await unit_env.get(JournalRepository)).save(
            make_journal(alice.id)
        )
        parent = await comment_repo.save(
            make_comment(journal.id, alice.id, "Top", created_at=minutes_ago(10))
        )
        await comment_repo.save(
            make_comment(journal.id, bob.id, "Reply", parent_id=parent.id)
        )

        # Act
        response = await use_case.execute(
            GetJournalCommentsRequest(journal_id=str(journal.id))
        )

        # Assert
        assert len(response.comments) == 1
        thread = response.comments[0]
        assert thread.author.username == "alice"
        assert [r.author.username for r in thread.replies] == ["bob"]
        assert thread.replies[0].parent_comment_id == str(parent.id)
        assert response.pagination.total_comments == 1
        assert response.pagination.current_page == 1

    @pytest.mark.asyncio
    async def test_unknown_author_yields_null_author(self, unit_env):
        use_case = await unit_env.get(GetJournalCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        owner = UserId(uuid4())
        journal = await (await unit_env.get(JournalRepository)).save(
            make_journal(owner)
        )
        await comment_repo.save(make_comment(journal.id, UserId(uuid4())))

        response = await use_case.execute(
            GetJournalCommentsRequest(journal_id=str(journal.id))
        )

        assert response.comments[0].author is None

    @pytest.mark.asyncio
    async def test_garbage_paging_falls_back_to_defaults(self, unit_env):
        use_case = await unit_env.get(GetJournalCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        owner = UserId(uuid4())
        journal = await (await unit_env.get(JournalRepository)).save(
            make_journal(owner)
        )
        for i in range(3):
            await comment_repo.save(make_comment(journal.id, owner, f"#{i}"))

        response = await use_case.execute(
            GetJournalCommentsRequest(
                journal_id=str(journal.id), page="abc", limit="-5"
            )
        )

        assert len(response.comments) == 3
        assert response.pagination.current_page == 1
        assert response.pagination.total_pages == 1

    @pytest.mark.asyncio
    async def test_missing_journal(self, unit_env):
        use_case = await unit_env.get(GetJournalCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetJournalCommentsRequest(journal_id=str(uuid4())))
