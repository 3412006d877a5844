"""Domain value objects for Quill."""

from quill.domain.value.identifiers import (
    CommentId,
    JournalId,
    UserId,
    parse_comment_id,
    parse_journal_id,
    parse_user_id,
)
from quill.domain.value.types import (
    PageWindow,
    Pagination,
    UserRole,
    Username,
    clean_text,
)

__all__ = [
    # Identifiers
    "UserId",
    "JournalId",
    "CommentId",
    "parse_user_id",
    "parse_journal_id",
    "parse_comment_id",
    # Types
    "PageWindow",
    "Pagination",
    "UserRole",
    "Username",
    "clean_text",
]
