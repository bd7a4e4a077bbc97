"""Commenter use cases."""

from .confirm_email import ConfirmEmailRequest, ConfirmEmailResponse, ConfirmEmailUseCase
from .delete_commenter_comments import (
    DeleteCommenterCommentsRequest,
    DeleteCommenterCommentsResponse,
    DeleteCommenterCommentsUseCase,
)
from .list_commenters import ListCommentersRequest, ListCommentersUseCase

__all__ = [
    "ConfirmEmailRequest",
    "ConfirmEmailResponse",
    "ConfirmEmailUseCase",
    "DeleteCommenterCommentsRequest",
    "DeleteCommenterCommentsResponse",
    "DeleteCommenterCommentsUseCase",
    "ListCommentersRequest",
    "ListCommentersUseCase",
]
