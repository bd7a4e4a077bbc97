"""Domain model entities."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.commenter import Commenter
from discuss.domain.model.display import (
    CommenterListing,
    CommenterSummary,
    CommentWrapper,
    DisplayComment,
)
from discuss.domain.model.page import Page
from discuss.domain.model.project import Project

__all__ = [
    "Comment",
    "Commenter",
    "CommenterListing",
    "CommenterSummary",
    "CommentWrapper",
    "DisplayComment",
    "Page",
    "Project",
]
