"""Repository interfaces for Quill domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quill.domain.repository.comment import CommentRepository
from quill.domain.repository.journal import JournalRepository
from quill.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "JournalRepository",
    "CommentRepository",
]
