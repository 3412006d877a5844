"""Comment entity.

Comments are attached to journals and nest at most one level deep:
a comment is either top-level (no parent) or a reply to a top-level
comment of the same journal.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import CommentId, JournalId, UserId

MAX_CONTENT_LENGTH = 10000


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through parent_id:
    - None: top-level comment, attached directly to the journal
    - CommentId: reply to that top-level comment

    Content is stored trimmed. Editing sets is_edited and edited_at;
    author, journal and parent never change after creation.
    """

    id: CommentId
    journal_id: JournalId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_id: Optional[CommentId] = None
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment replies to another comment."""
        return self.parent_id is not None

    @property
    def is_top_level(self) -> bool:
        """Whether this comment is attached directly to its journal."""
        return self.parent_id is None

    def edit(self, content: str, now: datetime) -> "Comment":
        """Return a copy carrying new content and edit markers."""
        return self.model_copy(
            update={
                "content": content,
                "is_edited": True,
                "edited_at": now,
                "updated_at": now,
            }
        )
