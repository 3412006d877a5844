"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentDeletion, CommentService
from .comment_tree_service import CommentTreeService
from .journal_service import JournalService
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentDeletion",
    "CommentService",
    "CommentTreeService",
    "JournalService",
    "JWTService",
    "Service",
    "UserService",
]
