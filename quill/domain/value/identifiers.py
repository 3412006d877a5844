"""Strongly typed identifiers for Quill domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from quill.domain.error import InvalidIdError

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
JournalId = NewType("JournalId", UUID)
CommentId = NewType("CommentId", UUID)


def _parse_uuid(value: str | None, label: str) -> UUID:
    """Parse an identifier string, rejecting anything that is not a UUID."""
    if not value:
        raise InvalidIdError(label, value)
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdError(label, value)


def parse_user_id(value: str | None) -> UserId:
    """Parse a user ID from its string form.

    Raises:
        InvalidIdError: If the value is not a well-formed identifier
    """
    return UserId(_parse_uuid(value, "user"))


def parse_journal_id(value: str | None) -> JournalId:
    """Parse a journal ID from its string form.

    Raises:
        InvalidIdError: If the value is not a well-formed identifier
    """
    return JournalId(_parse_uuid(value, "journal"))


def parse_comment_id(value: str | None) -> CommentId:
    """Parse a comment ID from its string form.

    Raises:
        InvalidIdError: If the value is not a well-formed identifier
    """
    return CommentId(_parse_uuid(value, "comment"))
