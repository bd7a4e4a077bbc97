"""Get comments use case."""

from typing import Optional

from pydantic import BaseModel, Field

from discuss.application.usecase.base import parse_uuid
from discuss.domain.error import ValidationError
from discuss.domain.model import CommentWrapper
from discuss.domain.service import ThreadService
from discuss.domain.value import CommentId, ProjectId, ThreadOptions, UserId


class GetCommentsRequest(BaseModel):
    """Get comments request (widget and dashboard listings)."""

    project_id: str  # UUID string
    timezone_offset: int = 0  # Minutes from UTC
    parent_id: Optional[str] = None
    roots_only: bool = True
    approved: Optional[bool] = None
    page_slug: Optional[str] = None
    only_own: bool = False
    user_id: Optional[str] = None  # Authenticated dashboard account, if any
    page: int = Field(default=1, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1)
    include_replies: bool = False
    include_deleted_parents: bool = False
    is_admin: bool = False


class GetCommentsUseCase:
    """Use case for reading a page of a project's comments."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get comments use case.

        Args:
            thread_service: Thread reading domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetCommentsRequest) -> CommentWrapper:
        """Execute get comments flow.

        Args:
            request: Get comments request

        Returns:
            Paginated wrapper of formatted comments

        Raises:
            ValidationError: If an ID is malformed, or ``only_own`` is set
                without a user
        """
        owner_id = None
        if request.only_own:
            if not request.user_id:
                raise ValidationError("only_own requires an authenticated user")
            owner_id = UserId(parse_uuid(request.user_id, "user id"))

        options = ThreadOptions(
            parent_id=(
                CommentId(parse_uuid(request.parent_id, "parent id"))
                if request.parent_id
                else None
            ),
            roots_only=request.roots_only,
            approved=request.approved,
            page_slug=request.page_slug,
            owner_id=owner_id,
            page=request.page,
            page_size=request.page_size,
            include_replies=request.include_replies,
            include_deleted_parents=request.include_deleted_parents,
            admin_view=request.is_admin,
        )

        return await self.thread_service.get_comments(
            ProjectId(parse_uuid(request.project_id, "project id")),
            timezone_offset=request.timezone_offset,
            options=options,
        )
