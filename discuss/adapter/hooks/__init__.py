"""Moderation hook dispatch and sinks."""

from .dispatcher import HookEvent, InlineHookDispatcher, QueuedHookDispatcher
from .logging_hook import LoggingCommentHook
from .recording import RecordingCommentHook

__all__ = [
    "HookEvent",
    "InlineHookDispatcher",
    "LoggingCommentHook",
    "QueuedHookDispatcher",
    "RecordingCommentHook",
]
