"""SQLAlchemy table definitions for Quill.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    ),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),  # Lower-cased
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# ============================================================================
# JOURNALS TABLE
# ============================================================================
journals_table = Table(
    "journals",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index(
    "idx_journals_author_created",
    journals_table.c.author_id,
    journals_table.c.created_at.desc(),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    ),
    Column(
        "journal_id",
        UUID,
        ForeignKey("journals.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),  # NULL for top-level comments
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("is_edited", Boolean, nullable=False, server_default=text("false")),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# Top-level listing per journal, newest first
Index(
    "idx_comments_journal_created",
    comments_table.c.journal_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
