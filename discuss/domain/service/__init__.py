"""Domain services."""

from .base import Service
from .clock import Clock, SystemClock
from .formatter import CommentFormatter
from .hooks import CommentHook, HookDispatcher
from .moderation_service import ModerationService
from .page_service import PageService
from .thread_service import ThreadService
from .token_service import (
    ApproveCommentClaims,
    EmailVerifyClaims,
    ReplyNotificationClaims,
    TokenService,
)
from .verification_service import VerificationService

__all__ = [
    "ApproveCommentClaims",
    "Clock",
    "CommentFormatter",
    "CommentHook",
    "EmailVerifyClaims",
    "HookDispatcher",
    "ModerationService",
    "PageService",
    "ReplyNotificationClaims",
    "Service",
    "SystemClock",
    "ThreadService",
    "TokenService",
    "VerificationService",
]
