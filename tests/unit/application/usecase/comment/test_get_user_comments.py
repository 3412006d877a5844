"""Unit tests for GetUserCommentsUseCase."""

from uuid import uuid4

import pytest

from quill.application.usecase.comment import (
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
)
from quill.domain.repository import (
    CommentRepository,
    JournalRepository,
    UserRepository,
)
from quill.domain.value import JournalId
from tests.conftest import make_comment, make_journal, make_user, minutes_ago
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserCommentsUseCase:
    """Tests for GetUserCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_comments_carry_journal_titles(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetUserCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        journal_repo = await unit_env.get(JournalRepository)
        alice = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        first = await journal_repo.save(make_journal(alice.id, "First"))
        second = await journal_repo.save(make_journal(alice.id, "Second"))
        await comment_repo.save(
            make_comment(first.id, alice.id, "On first", created_at=minutes_ago(5))
        )
        await comment_repo.save(make_comment(second.id, alice.id, "On second"))

        # Act
        response = await use_case.execute(
            GetUserCommentsRequest(user_id=str(alice.id))
        )

        # Assert
        assert [c.journal.title for c in response.comments] == ["Second", "First"]
        assert all(c.author.username == "alice" for c in response.comments)
        assert response.pagination.total_comments == 2

    @pytest.mark.asyncio
    async def test_deleted_journal_yields_null_summary(self, unit_env):
        use_case = await unit_env.get(GetUserCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        alice = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        await comment_repo.save(make_comment(JournalId(uuid4()), alice.id))

        response = await use_case.execute(
            GetUserCommentsRequest(user_id=str(alice.id))
        )

        assert response.comments[0].journal is None

    @pytest.mark.asyncio
    async def test_limit_is_honoured(self, unit_env):
        use_case = await unit_env.get(GetUserCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        alice = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        for _ in range(3):
            await comment_repo.save(make_comment(JournalId(uuid4()), alice.id))

        response = await use_case.execute(
            GetUserCommentsRequest(user_id=str(alice.id), page="2", limit="2")
        )

        assert len(response.comments) == 1
        assert response.pagination.total_pages == 2
        assert response.pagination.has_prev is True
