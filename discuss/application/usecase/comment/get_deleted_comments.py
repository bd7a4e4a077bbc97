"""Get deleted comments use case."""

from typing import Optional

from pydantic import BaseModel, Field

from discuss.application.usecase.base import parse_uuid
from discuss.domain.model import CommentWrapper
from discuss.domain.service import ThreadService
from discuss.domain.value import ProjectId


class GetDeletedCommentsRequest(BaseModel):
    """Get deleted comments request (dashboard trash view)."""

    project_id: str  # UUID string
    timezone_offset: int = 0
    page: int = Field(default=1, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1)


class GetDeletedCommentsUseCase:
    """Use case for listing a project's soft-deleted comments."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get deleted comments use case.

        Args:
            thread_service: Thread reading domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetDeletedCommentsRequest) -> CommentWrapper:
        return await self.thread_service.get_deleted_comments(
            ProjectId(parse_uuid(request.project_id, "project id")),
            timezone_offset=request.timezone_offset,
            page=request.page,
            page_size=request.page_size,
        )
