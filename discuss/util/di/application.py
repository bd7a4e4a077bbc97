"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    ApproveByTokenUseCase,
    ApproveCommentsUseCase,
    ConfirmReplyNotificationUseCase,
    CreateCommentUseCase,
    DeleteCommentsUseCase,
    GetCommentsUseCase,
    GetDeletedCommentsUseCase,
    HardDeleteCommentsUseCase,
    ReplyAsModeratorUseCase,
    RestoreCommentsUseCase,
    UnapproveCommentsUseCase,
)
from discuss.application.usecase.commenter import (
    ConfirmEmailUseCase,
    DeleteCommenterCommentsUseCase,
    ListCommentersUseCase,
)
from discuss.domain.service import (
    ModerationService,
    PageService,
    ThreadService,
    TokenService,
    VerificationService,
)
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Visitor-facing use cases
    @provide
    def get_create_comment_use_case(
        self,
        moderation_service: ModerationService,
        page_service: PageService,
        token_service: TokenService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            moderation_service=moderation_service,
            page_service=page_service,
            token_service=token_service,
        )

    @provide
    def get_get_comments_use_case(
        self, thread_service: ThreadService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(thread_service=thread_service)

    # Moderation use cases
    @provide
    def get_reply_as_moderator_use_case(
        self, moderation_service: ModerationService
    ) -> ReplyAsModeratorUseCase:
        """Provide reply as moderator use case."""
        return ReplyAsModeratorUseCase(moderation_service=moderation_service)

    @provide
    def get_approve_comments_use_case(
        self, moderation_service: ModerationService
    ) -> ApproveCommentsUseCase:
        """Provide approve comments use case."""
        return ApproveCommentsUseCase(moderation_service=moderation_service)

    @provide
    def get_unapprove_comments_use_case(
        self, moderation_service: ModerationService
    ) -> UnapproveCommentsUseCase:
        """Provide unapprove comments use case."""
        return UnapproveCommentsUseCase(moderation_service=moderation_service)

    @provide
    def get_delete_comments_use_case(
        self, moderation_service: ModerationService
    ) -> DeleteCommentsUseCase:
        """Provide soft-delete comments use case."""
        return DeleteCommentsUseCase(moderation_service=moderation_service)

    @provide
    def get_restore_comments_use_case(
        self, moderation_service: ModerationService
    ) -> RestoreCommentsUseCase:
        """Provide restore comments use case."""
        return RestoreCommentsUseCase(moderation_service=moderation_service)

    @provide
    def get_hard_delete_comments_use_case(
        self, moderation_service: ModerationService
    ) -> HardDeleteCommentsUseCase:
        """Provide hard-delete comments use case."""
        return HardDeleteCommentsUseCase(moderation_service=moderation_service)

    @provide
    def get_get_deleted_comments_use_case(
        self, thread_service: ThreadService
    ) -> GetDeletedCommentsUseCase:
        """Provide get deleted comments use case."""
        return GetDeletedCommentsUseCase(thread_service=thread_service)

    @provide
    def get_delete_commenter_comments_use_case(
        self, moderation_service: ModerationService
    ) -> DeleteCommenterCommentsUseCase:
        """Provide delete commenter comments use case."""
        return DeleteCommenterCommentsUseCase(moderation_service=moderation_service)

    @provide
    def get_list_commenters_use_case(
        self, thread_service: ThreadService
    ) -> ListCommentersUseCase:
        """Provide list commenters use case."""
        return ListCommentersUseCase(thread_service=thread_service)

    # Signed-link use cases
    @provide
    def get_approve_by_token_use_case(
        self, moderation_service: ModerationService, token_service: TokenService
    ) -> ApproveByTokenUseCase:
        """Provide approve by token use case."""
        return ApproveByTokenUseCase(
            moderation_service=moderation_service, token_service=token_service
        )

    @provide
    def get_confirm_email_use_case(
        self,
        verification_service: VerificationService,
        moderation_service: ModerationService,
        token_service: TokenService,
    ) -> ConfirmEmailUseCase:
        """Provide confirm email use case."""
        return ConfirmEmailUseCase(
            verification_service=verification_service,
            moderation_service=moderation_service,
            token_service=token_service,
        )

    @provide
    def get_confirm_reply_notification_use_case(
        self, moderation_service: ModerationService, token_service: TokenService
    ) -> ConfirmReplyNotificationUseCase:
        """Provide confirm reply notification use case."""
        return ConfirmReplyNotificationUseCase(
            moderation_service=moderation_service, token_service=token_service
        )
