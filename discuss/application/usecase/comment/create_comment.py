"""Create comment use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from discuss.application.usecase.base import parse_uuid
from discuss.domain.model import DisplayComment
from discuss.domain.service import ModerationService, PageService, TokenService
from discuss.domain.value import CommentId, ModeratorIdentity, ProjectId


class CreateCommentRequest(BaseModel):
    """Create comment request (submitted through the embedded widget)."""

    project_id: str  # UUID string
    page_slug: str = Field(min_length=1)
    content: str = Field(min_length=1)
    email: Optional[str] = None
    nickname: Optional[str] = None
    parent_id: Optional[str] = None  # Parent comment ID for replies
    page_title: Optional[str] = None
    page_url: Optional[str] = None
    # Commenter asked to be emailed about replies
    accept_notify: bool = False


class CreateCommentResponse(BaseModel):
    """Create comment response.

    Tokens are handed to the notification layer, which mails the links.
    """

    comment: DisplayComment
    # Sent to the project owner while the comment awaits moderation
    approve_token: Optional[str] = None
    # Sent to the commenter to confirm their email
    email_verify_token: Optional[str] = None
    # Sent to the commenter to confirm reply notifications
    reply_notification_token: Optional[str] = None


class CreateCommentUseCase:
    """Use case for submitting a comment to a project's page."""

    def __init__(
        self,
        moderation_service: ModerationService,
        page_service: PageService,
        token_service: TokenService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            moderation_service: Moderation domain service
            page_service: Page domain service
            token_service: Signed-link token service
        """
        self.moderation_service = moderation_service
        self.page_service = page_service
        self.token_service = token_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the project exists and isn't deleted
        2. Touch the page by slug (created on first comment)
        3. Create the comment (auto-approval decided by the verification gate)
        4. Issue the signed links the notification layer needs

        Args:
            request: Create comment request

        Returns:
            Created comment and the links to send

        Raises:
            NotFoundError: If the project or parent comment doesn't exist
            ValidationError: If an ID is malformed or the parent is on another page
        """
        project_id = ProjectId(parse_uuid(request.project_id, "project id"))
        project = await self.page_service.get_live_project(project_id)

        page = await self.page_service.touch_page(
            project_id,
            request.page_slug,
            title=request.page_title,
            url=request.page_url,
        )

        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent id"))
            if request.parent_id
            else None
        )
        comment = await self.moderation_service.create_comment(
            project_id=project_id,
            page_id=page.id,
            content=request.content,
            email=request.email,
            nickname=request.nickname,
            parent_id=parent_id,
        )

        response = CreateCommentResponse(comment=comment)
        if not comment.approved:
            response.approve_token = self.token_service.create_approve_token(
                comment.id, ModeratorIdentity(user_id=project.owner_id)
            )
        if request.email and not comment.is_email_verified:
            response.email_verify_token = (
                self.token_service.create_email_verify_token(
                    request.email, project_id, comment.id
                )
            )
        if request.email and request.accept_notify:
            response.reply_notification_token = (
                self.token_service.create_reply_notification_token(comment.id)
            )

        logfire.info(
            "Comment submitted",
            comment_id=str(comment.id),
            project_id=str(project_id),
            approved=comment.approved,
        )
        return response
