"""List commenters use case."""

from typing import Optional

from pydantic import BaseModel, Field

from discuss.application.usecase.base import parse_uuid
from discuss.domain.model import CommenterListing
from discuss.domain.service import ThreadService
from discuss.domain.value import ProjectId


class ListCommentersRequest(BaseModel):
    """List commenters request (dashboard commenters view)."""

    project_id: str  # UUID string
    timezone_offset: int = 0
    page: int = Field(default=1, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1)


class ListCommentersUseCase:
    """Use case for listing a project's authors by activity."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize list commenters use case.

        Args:
            thread_service: Thread reading domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: ListCommentersRequest) -> CommenterListing:
        return await self.thread_service.get_commenters(
            ProjectId(parse_uuid(request.project_id, "project id")),
            timezone_offset=request.timezone_offset,
            page=request.page,
            page_size=request.page_size,
        )
