"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from discuss.domain.model import Comment, Commenter, Page, Project
from discuss.domain.value import CommentId, PageId, ProjectId, UserId


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model."""
    return Project(
        id=ProjectId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        title=row["title"],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def row_to_page(row: Dict[str, Any]) -> Page:
    """Convert database row to Page domain model."""
    return Page(
        id=PageId(_uuid(row["id"])),
        project_id=ProjectId(_uuid(row["project_id"])),
        slug=row["slug"],
        title=row.get("title"),
        url=row.get("url"),
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_id"))
    moderator_id = _uuid(row.get("moderator_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        page_id=PageId(_uuid(row["page_id"])),
        parent_id=CommentId(parent_id) if parent_id else None,
        content=row["content"],
        by_email=row.get("by_email"),
        by_nickname=row.get("by_nickname"),
        moderator_id=UserId(moderator_id) if moderator_id else None,
        approved=row["approved"],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
        notify_confirmed_at=row.get("notify_confirmed_at"),
    )


def row_to_commenter(row: Dict[str, Any]) -> Commenter:
    """Convert database row to Commenter domain model."""
    return Commenter(
        email=row["email"],
        verified_at=row.get("verified_at"),
        created_at=row["created_at"],
    )


def to_dict(model: Project | Page | Comment | Commenter) -> Dict[str, Any]:
    """Convert a domain model to a dict suitable for insertion/update."""
    return model.model_dump()
