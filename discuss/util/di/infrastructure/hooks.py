"""Hook dispatch infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from discuss.adapter.hooks import LoggingCommentHook, QueuedHookDispatcher
from discuss.config import HookSettings
from discuss.domain.service import HookDispatcher
from discuss.util.di.base import ProviderBase


class HooksProvider(ProviderBase):
    """Hooks component base."""

    __mock_component__ = "hooks"


class ProdHooksProvider(HooksProvider):
    """Production hooks provider: queued delivery on a background worker."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_hook_dispatcher(
        self, settings: HookSettings
    ) -> AsyncIterator[HookDispatcher]:
        """Provide the process-wide hook dispatcher.

        Pending events are delivered before the container closes.
        """
        dispatcher = QueuedHookDispatcher(
            hooks=[LoggingCommentHook()], queue_size=settings.queue_size
        )
        dispatcher.start()
        yield dispatcher
        await dispatcher.stop()
