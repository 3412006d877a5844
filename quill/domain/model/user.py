"""User aggregate root.

Users register with an email and password and are identified on the
API by a bearer token.
"""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import UserId, UserRole, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)  # Stored lower-cased
    password_hash: str = Field(repr=False)
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
