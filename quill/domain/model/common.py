"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for users, journals and comments.

    Instances are frozen; changes go through `model_copy(update=...)` and
    are persisted by handing the copy back to the repository.
    """

    model_config = ConfigDict(frozen=True)
