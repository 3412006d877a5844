"""Domain model entities for Quill."""

from quill.domain.model.comment import Comment
from quill.domain.model.journal import Journal
from quill.domain.model.thread import CommentPage, CommentThread
from quill.domain.model.user import User

__all__ = [
    "User",
    "Journal",
    "Comment",
    "CommentThread",
    "CommentPage",
]
