"""Test configuration and fixtures."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from dishka import AsyncContainer

from discuss.domain.model import Comment, Page, Project
from discuss.domain.repository import (
    CommentRepository,
    PageRepository,
    ProjectRepository,
)
from discuss.domain.value import CommentId, PageId, ProjectId, UserId
from tests.di import TickingClock


async def seed_project(
    env: AsyncContainer,
    owner_id: Optional[UserId] = None,
    deleted: bool = False,
) -> Project:
    """Store a project owned by ``owner_id`` (a fresh account by default)."""
    project_repo = await env.get(ProjectRepository)
    project = Project(
        id=ProjectId(uuid4()),
        owner_id=owner_id or UserId(uuid4()),
        title="Test Blog",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        deleted_at=datetime(2024, 1, 2, tzinfo=timezone.utc) if deleted else None,
    )
    return await project_repo.save(project)


async def seed_page(
    env: AsyncContainer, project: Project, slug: str = "/posts/hello"
) -> Page:
    """Store a page of ``project``."""
    page_repo = await env.get(PageRepository)
    page = Page(
        id=PageId(uuid4()),
        project_id=project.id,
        slug=slug,
        title="Hello",
        url=f"https://blog.example.com{slug}",
    )
    return await page_repo.save(page)


async def seed_comment(
    env: AsyncContainer,
    page: Page,
    content: str = "A comment",
    email: Optional[str] = "reader@example.com",
    parent: Optional[Comment] = None,
    approved: bool = False,
    deleted: bool = False,
    moderator_id: Optional[UserId] = None,
) -> Comment:
    """Store a comment directly, bypassing moderation rules.

    Timestamps come from the container's clock so seeding order is
    creation order.
    """
    comment_repo = await env.get(CommentRepository)
    clock = await env.get(TickingClock)
    created_at = clock.now()
    comment = Comment(
        id=CommentId(uuid4()),
        page_id=page.id,
        parent_id=parent.id if parent else None,
        content=content,
        by_email=email,
        by_nickname="Reader" if email else None,
        moderator_id=moderator_id,
        approved=approved,
        created_at=created_at,
        deleted_at=created_at if deleted else None,
    )
    return await comment_repo.create(comment)
