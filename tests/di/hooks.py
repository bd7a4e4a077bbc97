"""Mock hook providers for testing."""

from dishka import Scope, provide

from discuss.adapter.hooks import InlineHookDispatcher, RecordingCommentHook
from discuss.domain.service import HookDispatcher
from discuss.util.di.infrastructure.hooks import HooksProvider


class MockHooksProvider(HooksProvider):
    """Delivers hook events inline to a recording sink."""

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_recording_hook(self) -> RecordingCommentHook:
        """Provide the sink tests assert against."""
        return RecordingCommentHook()

    @provide(scope=Scope.REQUEST)
    def get_hook_dispatcher(self, recording: RecordingCommentHook) -> HookDispatcher:
        """Provide inline dispatcher."""
        return InlineHookDispatcher([recording])
