"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from quill.domain.error import InvalidIdError
from quill.domain.repository import JournalRepository, UserRepository
from tests.conftest import make_journal, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_response_carries_author_summary(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        journal = await (await unit_env.get(JournalRepository)).save(
            make_journal(user.id)
        )

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                journal_id=str(journal.id),
                author_id=str(user.id),
                content=" Lovely ",
            )
        )

        # Assert
        assert response.message == "Comment created successfully"
        assert response.comment.content == "Lovely"
        assert response.comment.parent_comment_id is None
        assert response.comment.author is not None
        assert response.comment.author.username == "alice"
        assert response.comment.author.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_reply_reports_parent(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        user = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        journal = await (await unit_env.get(JournalRepository)).save(
            make_journal(user.id)
        )
        parent = await use_case.execute(
            CreateCommentRequest(
                journal_id=str(journal.id), author_id=str(user.id), content="Top"
            )
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                journal_id=str(journal.id),
                author_id=str(user.id),
                content="Reply",
                parent_comment_id=parent.comment.id,
            )
        )

        assert reply.comment.parent_comment_id == parent.comment.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("journal_id", "parent_comment_id"),
        [("not-a-uuid", None), (str(uuid4()), "also-not-a-uuid")],
    )
    async def test_malformed_ids_are_rejected(
        self, unit_env, journal_id, parent_comment_id
    ):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(InvalidIdError):
            await use_case.execute(
                CreateCommentRequest(
                    journal_id=journal_id,
                    author_id=str(uuid4()),
                    content="Hello",
                    parent_comment_id=parent_comment_id,
                )
            )

    @pytest.mark.asyncio
    async def test_output_uses_camel_case(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        user = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        journal = await (await unit_env.get(JournalRepository)).save(
            make_journal(user.id)
        )

        response = await use_case.execute(
            CreateCommentRequest(
                journal_id=str(journal.id), author_id=str(user.id), content="Hi"
            )
        )
        payload = response.model_dump(by_alias=True)

        assert set(payload["comment"]) >= {
            "journalId",
            "parentCommentId",
            "isEdited",
            "editedAt",
            "createdAt",
            "updatedAt",
        }
