"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from quill.domain.model import Comment, Journal, User
from quill.domain.value import CommentId, JournalId, UserId, UserRole, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_journal(row: Dict[str, Any]) -> Journal:
    """Convert database row to Journal domain model.

    Args:
        row: Database row as dict

    Returns:
        Journal domain model
    """
    return Journal(
        id=JournalId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def journal_to_dict(journal: Journal) -> Dict[str, Any]:
    """Convert Journal domain model to database dict.

    Args:
        journal: Journal domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return journal.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        journal_id=JournalId(_uuid(row["journal_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()
