"""PostgreSQL repository implementations."""

from quill.persistence.repository.comment import PostgresCommentRepository
from quill.persistence.repository.journal import PostgresJournalRepository
from quill.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresJournalRepository",
    "PostgresUserRepository",
]
