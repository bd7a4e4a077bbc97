"""Domain layer DI providers."""

from dishka import Scope, provide
from markdown_it import MarkdownIt

from discuss.config import AuthSettings, ModerationSettings
from discuss.domain.repository import (
    CommenterRepository,
    CommentRepository,
    PageRepository,
    ProjectRepository,
    TransactionManager,
)
from discuss.domain.service import (
    Clock,
    CommentFormatter,
    HookDispatcher,
    ModerationService,
    PageService,
    ThreadService,
    TokenService,
    VerificationService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances sharing one transaction manager.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_formatter(
        self, markdown: MarkdownIt, settings: ModerationSettings
    ) -> CommentFormatter:
        """Provide comment formatter."""
        return CommentFormatter(markdown=markdown, settings=settings)

    @provide
    def get_token_service(self, auth_settings: AuthSettings) -> TokenService:
        """Provide signed-link token service."""
        return TokenService(auth_settings=auth_settings)

    @provide
    def get_verification_service(
        self,
        comment_repository: CommentRepository,
        commenter_repository: CommenterRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> VerificationService:
        """Provide commenter verification service."""
        return VerificationService(
            comment_repository=comment_repository,
            commenter_repository=commenter_repository,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    @provide
    def get_moderation_service(
        self,
        comment_repository: CommentRepository,
        verification_service: VerificationService,
        formatter: CommentFormatter,
        hook_dispatcher: HookDispatcher,
        transaction_manager: TransactionManager,
        clock: Clock,
        settings: ModerationSettings,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            comment_repository=comment_repository,
            verification_service=verification_service,
            formatter=formatter,
            hook_dispatcher=hook_dispatcher,
            transaction_manager=transaction_manager,
            clock=clock,
            settings=settings,
        )

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        page_repository: PageRepository,
        verification_service: VerificationService,
        formatter: CommentFormatter,
        settings: ModerationSettings,
    ) -> ThreadService:
        """Provide thread reading service."""
        return ThreadService(
            comment_repository=comment_repository,
            page_repository=page_repository,
            verification_service=verification_service,
            formatter=formatter,
            settings=settings,
        )

    @provide
    def get_page_service(
        self,
        page_repository: PageRepository,
        project_repository: ProjectRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> PageService:
        """Provide page domain service."""
        return PageService(
            page_repository=page_repository,
            project_repository=project_repository,
            transaction_manager=transaction_manager,
            clock=clock,
        )
