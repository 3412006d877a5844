"""Read models for assembled comment threads.

These are not persisted; the tree service composes them from
comments fetched out of the repository.
"""

from pydantic import Field

from quill.domain.model.comment import Comment
from quill.domain.model.common import DomainModel
from quill.domain.value import Pagination


class CommentThread(DomainModel):
    """A comment together with its direct replies, oldest reply first.

    Replies always carry an empty list here; only one level is assembled.
    """

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)


class CommentPage(DomainModel):
    """One page of top-level threads for a journal."""

    threads: list[CommentThread]
    pagination: Pagination
