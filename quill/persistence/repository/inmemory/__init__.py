"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .journal import InMemoryJournalRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryJournalRepository",
    "InMemoryUserRepository",
]
