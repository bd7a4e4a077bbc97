"""Comment formatting for display."""

from datetime import timedelta, timezone
from typing import Mapping, Optional

from markdown_it import MarkdownIt

from discuss.config import ModerationSettings
from discuss.domain.model import Comment, CommentWrapper, DisplayComment, Page

from .base import Service


class CommentFormatter(Service):
    """Turns stored comments into display-ready values.

    Pure: no I/O. Verification status and page data are looked up by the
    caller in batches and passed in.
    """

    def __init__(self, markdown: MarkdownIt, settings: ModerationSettings) -> None:
        """Initialize comment formatter.

        Args:
            markdown: Shared, preconfigured markdown renderer
            settings: Moderation settings (placeholders, timestamp format)
        """
        self.markdown = markdown
        self.settings = settings

    def render(self, content: str) -> str:
        """Render markdown source to sanitized HTML."""
        return self.markdown.render(content)

    def localize(self, comment: Comment, timezone_offset: int = 0) -> str:
        """Format the creation time shifted by a UTC offset in minutes."""
        created_at = comment.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        shifted = created_at.astimezone(timezone.utc) + timedelta(
            minutes=timezone_offset
        )
        return shifted.strftime(self.settings.timestamp_format)

    def format(
        self,
        comment: Comment,
        timezone_offset: int = 0,
        verification_map: Optional[Mapping[str, bool]] = None,
        is_admin: bool = False,
        page: Optional[Page] = None,
        replies: Optional[CommentWrapper] = None,
    ) -> DisplayComment:
        """Format a comment for display.

        Deleted comments keep their place in a thread, but outside the admin
        context their content and nickname are replaced with placeholders.

        Args:
            comment: Stored comment
            timezone_offset: Viewer's offset from UTC in minutes
            verification_map: Email -> verified flag for the comments being rendered
            is_admin: Whether the viewer is a moderator
            page: Page the comment belongs to, if loaded
            replies: Already formatted replies wrapper

        Returns:
            Display comment
        """
        content = comment.content
        nickname = comment.by_nickname
        if comment.is_deleted and not is_admin:
            content = self.settings.deleted_content_placeholder
            nickname = self.settings.deleted_nickname_placeholder

        # Comments without an email (and moderator comments) carry no badge
        if not comment.by_email or comment.is_moderator_comment:
            is_email_verified = True
        else:
            is_email_verified = (verification_map or {}).get(comment.by_email, False)

        fields = comment.model_dump()
        fields.update(content=content, by_nickname=nickname)

        return DisplayComment(
            **fields,
            parsed_content=self.render(content),
            parsed_created_at=self.localize(comment, timezone_offset),
            is_email_verified=is_email_verified,
            replies=replies or CommentWrapper(),
            page_slug=page.slug if page else None,
            page_url=page.url if page else None,
        )
