"""Delete a commenter's comments use case."""

from pydantic import BaseModel, Field

from discuss.application.usecase.base import parse_uuid
from discuss.domain.service import ModerationService
from discuss.domain.value import ProjectId


class DeleteCommenterCommentsRequest(BaseModel):
    """Delete commenter comments request (dashboard commenters view)."""

    project_id: str  # UUID string
    emails: list[str] = Field(min_length=1)


class DeleteCommenterCommentsResponse(BaseModel):
    """Delete commenter comments response."""

    requested: int  # Distinct emails
    affected: int  # Comments newly soft-deleted


class DeleteCommenterCommentsUseCase:
    """Use case for soft-deleting every comment by some authors on a project."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize delete commenter comments use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(
        self, request: DeleteCommenterCommentsRequest
    ) -> DeleteCommenterCommentsResponse:
        emails = list(dict.fromkeys(request.emails))
        affected = await self.moderation_service.soft_delete_by_emails(
            ProjectId(parse_uuid(request.project_id, "project id")), emails
        )
        return DeleteCommenterCommentsResponse(requested=len(emails), affected=affected)
