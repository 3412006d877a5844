"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta
from uuid import uuid4

import logfire

# Must be set before any Settings() is constructed
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)

from quill.domain.model import Comment, Journal, User  # noqa: E402
from quill.domain.value import (  # noqa: E402
    CommentId,
    JournalId,
    UserId,
    UserRole,
    Username,
)


def make_user(username: str = "alice", email: str | None = None) -> User:
    """Build a user without going through registration (no bcrypt cost)."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=email or f"{username}@example.com",
        password_hash="not-a-real-hash",
        role=UserRole.USER,
    )


def make_journal(author_id: UserId, title: str = "Day one") -> Journal:
    """Build a journal owned by author_id."""
    return Journal(
        id=JournalId(uuid4()),
        author_id=author_id,
        title=title,
        content="Dear diary...",
    )


def make_comment(
    journal_id: JournalId,
    author_id: UserId,
    content: str = "Nice entry!",
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
) -> Comment:
    """Build a comment; pass created_at to control ordering."""
    created_at = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        journal_id=journal_id,
        author_id=author_id,
        content=content,
        parent_id=parent_id,
        created_at=created_at,
        updated_at=created_at,
    )


def minutes_ago(minutes: int) -> datetime:
    """Timestamp `minutes` before now, for ordering fixtures."""
    return datetime.now() - timedelta(minutes=minutes)
