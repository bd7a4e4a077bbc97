"""Hook dispatchers.

Moderation events are delivered after the triggering transaction has
committed. A failing sink is logged and skipped; it never reaches the
caller of the moderation operation and never affects the other sinks.
"""

import asyncio
from abc import abstractmethod
from typing import Any, NamedTuple, Optional, Sequence

import logfire

from discuss.domain.model import Comment
from discuss.domain.service.hooks import CommentHook, HookDispatcher
from discuss.domain.value import CommentId, ProjectId


class HookEvent(NamedTuple):
    """A pending call to every registered sink."""

    method: str
    args: tuple[Any, ...]


class _FanOutDispatcher(HookDispatcher):
    """Calls every sink for an event, isolating sink failures."""

    def __init__(self, hooks: Sequence[CommentHook]) -> None:
        self.hooks = list(hooks)

    async def comment_created(self, comment: Comment, project_id: ProjectId) -> None:
        await self.dispatch(HookEvent("on_comment_created", (comment, project_id)))

    async def comment_approved(
        self, comment_id: CommentId, parent_id: Optional[CommentId]
    ) -> None:
        await self.dispatch(HookEvent("on_comment_approved", (comment_id, parent_id)))

    @abstractmethod
    async def dispatch(self, event: HookEvent) -> None:
        pass

    async def deliver(self, event: HookEvent) -> None:
        for hook in self.hooks:
            try:
                await getattr(hook, event.method)(*event.args)
            except Exception as e:
                logfire.error(
                    "Comment hook failed",
                    hook=type(hook).__name__,
                    event=event.method,
                    error=str(e),
                )


class InlineHookDispatcher(_FanOutDispatcher):
    """Delivers each event before returning to the caller (tests)."""

    async def dispatch(self, event: HookEvent) -> None:
        await self.deliver(event)


class QueuedHookDispatcher(_FanOutDispatcher):
    """Delivers events from a bounded queue on a background worker.

    Enqueueing never blocks the moderation operation: when the queue is
    full the event is dropped with a warning. The worker starts with the
    first event (or an explicit ``start()``) inside the running event loop.
    """

    def __init__(self, hooks: Sequence[CommentHook], queue_size: int) -> None:
        """Initialize queued dispatcher.

        Args:
            hooks: Sinks receiving every event
            queue_size: Maximum number of pending events
        """
        super().__init__(hooks)
        self.queue: asyncio.Queue[HookEvent] = asyncio.Queue(maxsize=queue_size)
        self._worker: Optional[asyncio.Task] = None
        self._closed = False

    def start(self) -> None:
        """Start the background worker if it isn't running."""
        if self._worker is None or self._worker.done():
            self._worker = asyncio.create_task(self._run())

    async def join(self) -> None:
        """Wait until every queued event has been delivered."""
        await self.queue.join()

    async def stop(self) -> None:
        """Deliver the pending events and stop the worker."""
        self._closed = True
        if self._worker is None:
            return

        if not self._worker.done():
            await self.queue.join()
            self._worker.cancel()
            try:
                await self._worker
            except asyncio.CancelledError:
                pass
        self._worker = None
        logfire.info("Hook dispatcher stopped")

    async def dispatch(self, event: HookEvent) -> None:
        if self._closed:
            logfire.warn("Hook dispatcher stopped, dropping event", event=event.method)
            return

        self.start()
        try:
            self.queue.put_nowait(event)
        except asyncio.QueueFull:
            logfire.warn(
                "Hook queue full, dropping event",
                event=event.method,
                queue_size=self.queue.maxsize,
            )

    async def _run(self) -> None:
        while True:
            event = await self.queue.get()
            try:
                await self.deliver(event)
            finally:
                self.queue.task_done()
