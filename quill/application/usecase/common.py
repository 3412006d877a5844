"""Response shapes shared by several use cases.

The public API speaks camelCase (`journalId`, `isEdited`, `hasNext`...),
so every response model derives from ApiModel, which aliases snake_case
fields on the way out and still accepts either spelling on the way in.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from quill.domain.model import Comment, CommentThread, Journal, User
from quill.domain.value import JournalId, Pagination, UserId


class ApiModel(BaseModel):
    """Base model for camelCase API payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(ApiModel):
    """Plain acknowledgement."""

    message: str


class AuthorSummary(ApiModel):
    """Public author fields attached to comments and journals."""

    id: str
    username: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(id=str(user.id), username=str(user.username), email=user.email)


class JournalSummary(ApiModel):
    """Journal fields attached to a comment outside its journal's page."""

    id: str
    title: str

    @classmethod
    def from_journal(cls, journal: Journal) -> "JournalSummary":
        return cls(id=str(journal.id), title=journal.title)


class CommentItem(ApiModel):
    """A single comment as returned by the API."""

    id: str
    journal_id: str
    parent_comment_id: Optional[str]
    content: str
    author: Optional[AuthorSummary]
    journal: Optional[JournalSummary] = None
    is_edited: bool
    edited_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime


class CommentThreadItem(CommentItem):
    """A comment with its replies attached (empty for replies)."""

    replies: list[CommentItem]


class PaginationItem(ApiModel):
    """Pagination envelope for comment listings."""

    current_page: int
    total_pages: int
    total_comments: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_pagination(cls, pagination: Pagination) -> "PaginationItem":
        return cls(
            current_page=pagination.current_page,
            total_pages=pagination.total_pages,
            total_comments=pagination.total_items,
            has_next=pagination.has_next,
            has_prev=pagination.has_prev,
        )


def to_comment_item(
    comment: Comment,
    authors: dict[UserId, User],
    journals: Optional[dict[JournalId, Journal]] = None,
) -> CommentItem:
    """Build the API view of a comment.

    A missing author or journal yields a null summary instead of failing.
    """
    author = authors.get(comment.author_id)
    journal = journals.get(comment.journal_id) if journals is not None else None
    return CommentItem(
        id=str(comment.id),
        journal_id=str(comment.journal_id),
        parent_comment_id=str(comment.parent_id) if comment.parent_id else None,
        content=comment.content,
        author=AuthorSummary.from_user(author) if author else None,
        journal=JournalSummary.from_journal(journal) if journal else None,
        is_edited=comment.is_edited,
        edited_at=comment.edited_at,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def to_thread_item(
    thread: CommentThread,
    authors: dict[UserId, User],
    journals: Optional[dict[JournalId, Journal]] = None,
) -> CommentThreadItem:
    """Build the API view of a comment thread."""
    head = to_comment_item(thread.comment, authors, journals)
    return CommentThreadItem(
        **head.model_dump(),
        replies=[to_comment_item(reply, authors) for reply in thread.replies],
    )


def thread_author_ids(threads: list[CommentThread]) -> list[UserId]:
    """Distinct author IDs across threads and their replies, in first-seen order."""
    seen: dict[UserId, None] = {}
    for thread in threads:
        seen[thread.comment.author_id] = None
        for reply in thread.replies:
            seen[reply.author_id] = None
    return list(seen)


class JournalItem(ApiModel):
    """A journal entry as returned by the API."""

    id: str
    title: str
    content: str
    author: Optional[AuthorSummary]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_journal(
        cls, journal: Journal, author: Optional[User] = None
    ) -> "JournalItem":
        return cls(
            id=str(journal.id),
            title=journal.title,
            content=journal.content,
            author=AuthorSummary.from_user(author) if author else None,
            created_at=journal.created_at,
            updated_at=journal.updated_at,
        )


class UserItem(ApiModel):
    """The authenticated user's own account details."""

    id: str
    username: str
    email: str
    role: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            id=str(user.id),
            username=str(user.username),
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
        )
