"""Comment use cases."""

from .approve_by_token import (
    ApproveByTokenRequest,
    ApproveByTokenResponse,
    ApproveByTokenUseCase,
)
from .approve_comments import ApproveCommentsUseCase
from .batch import BatchCommentsRequest, BatchCommentsResponse, BatchCommentsUseCase
from .confirm_reply_notification import (
    ConfirmReplyNotificationRequest,
    ConfirmReplyNotificationResponse,
    ConfirmReplyNotificationUseCase,
)
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comments import DeleteCommentsUseCase
from .get_comments import GetCommentsRequest, GetCommentsUseCase
from .get_deleted_comments import GetDeletedCommentsRequest, GetDeletedCommentsUseCase
from .hard_delete_comments import HardDeleteCommentsUseCase
from .reply_as_moderator import (
    ReplyAsModeratorRequest,
    ReplyAsModeratorResponse,
    ReplyAsModeratorUseCase,
)
from .restore_comments import RestoreCommentsUseCase
from .unapprove_comments import UnapproveCommentsUseCase

__all__ = [
    "ApproveByTokenRequest",
    "ApproveByTokenResponse",
    "ApproveByTokenUseCase",
    "ApproveCommentsUseCase",
    "BatchCommentsRequest",
    "BatchCommentsResponse",
    "BatchCommentsUseCase",
    "ConfirmReplyNotificationRequest",
    "ConfirmReplyNotificationResponse",
    "ConfirmReplyNotificationUseCase",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentsUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "GetDeletedCommentsRequest",
    "GetDeletedCommentsUseCase",
    "HardDeleteCommentsUseCase",
    "ReplyAsModeratorRequest",
    "ReplyAsModeratorResponse",
    "ReplyAsModeratorUseCase",
    "RestoreCommentsUseCase",
    "UnapproveCommentsUseCase",
]
