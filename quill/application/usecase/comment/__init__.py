"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_journal_comments import (
    GetJournalCommentsRequest,
    GetJournalCommentsResponse,
    GetJournalCommentsUseCase,
)
from .get_user_comments import (
    GetUserCommentsRequest,
    GetUserCommentsResponse,
    GetUserCommentsUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetJournalCommentsRequest",
    "GetJournalCommentsResponse",
    "GetJournalCommentsUseCase",
    "GetUserCommentsRequest",
    "GetUserCommentsResponse",
    "GetUserCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
