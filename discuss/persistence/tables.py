"""SQLAlchemy table definitions for the comment engine.

These table definitions are used with SQLAlchemy Core queries.
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
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("owner_id", UUID, nullable=False),  # Dashboard account, managed elsewhere
    Column("title", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_projects_owner_id", projects_table.c.owner_id)

# ============================================================================
# PAGES TABLE
# ============================================================================
pages_table = Table(
    "pages",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("slug", String(2048), nullable=False),
    Column("title", Text, nullable=True),
    Column("url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("project_id", "slug", name="uq_pages_project_slug"),
)

Index("idx_pages_project_id", pages_table.c.project_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("page_id", UUID, ForeignKey("pages.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("content", Text, nullable=False),  # Markdown source
    Column("by_email", String(255), nullable=True),
    Column("by_nickname", String(255), nullable=True),
    Column("moderator_id", UUID, nullable=True),  # Set for moderator replies
    Column("approved", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("notify_confirmed_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_comments_page_id", comments_table.c.page_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_by_email", comments_table.c.by_email)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_deleted_at", comments_table.c.deleted_at)

# ============================================================================
# COMMENTERS TABLE (email verification records)
# ============================================================================
commenters_table = Table(
    "commenters",
    metadata,
    Column("email", String(255), primary_key=True),
    Column("verified_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
