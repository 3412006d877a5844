"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
import re
from enum import Enum

from pydantic import Field, field_validator

from quill.domain.error import ValidationError
from quill.domain.value.common import RootValueObject, ValueObject

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class Username(RootValueObject[str]):
    """Public display name of a user.

    Must be 3-30 characters of letters, digits, dots, dashes or underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9._-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '.', '-' or '_'"
            )
        return v


def clean_text(value: str | None, label: str) -> str:
    """Trim user-supplied text and reject empty input.

    Args:
        value: Raw text from the caller
        label: Human readable name of the field, used in the error message

    Returns:
        The text with surrounding whitespace removed

    Raises:
        ValidationError: If the text is missing or only whitespace
    """
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _parse_positive_int(value: str | int | None, default: int) -> int:
    """Parse a query value the way a permissive `parseInt(x) || default` would.

    Leading integer digits are honoured ("3abc" -> 3); anything non-numeric
    or not strictly positive falls back to the default.
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    parsed = int(match.group(1))
    return parsed if parsed > 0 else default


class PageWindow(ValueObject):
    """A page of results: 1-based page number and page size."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @classmethod
    def from_query(
        cls,
        page: str | int | None = None,
        limit: str | int | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> "PageWindow":
        """Build a window from raw query parameters, never failing."""
        return cls(
            page=_parse_positive_int(page, DEFAULT_PAGE),
            page_size=_parse_positive_int(limit, default_page_size),
        )

    @property
    def offset(self) -> int:
        """Number of records to skip before this page."""
        return (self.page - 1) * self.page_size


class Pagination(ValueObject):
    """Pagination metadata returned alongside a page of results."""

    current_page: int
    total_pages: int
    total_items: int
    has_next: bool
    has_prev: bool

    @classmethod
    def for_window(cls, window: PageWindow, total_items: int) -> "Pagination":
        """Compute pagination metadata for a window over `total_items` records."""
        total_pages = math.ceil(total_items / window.page_size)
        return cls(
            current_page=window.page,
            total_pages=total_pages,
            total_items=total_items,
            has_next=window.page < total_pages,
            has_prev=window.page > 1,
        )
