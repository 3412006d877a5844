"""Journal aggregate root.

Journals are the entries users write; comments hang off them.
"""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import JournalId, UserId

MAX_TITLE_LENGTH = 200


class Journal(DomainModel):
    """Journal entry owned by a single user."""

    id: JournalId
    author_id: UserId
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
