"""Shared state for the in-memory repositories."""

from discuss.domain.model import Comment, Commenter, Page, Project
from discuss.domain.value import CommentId, PageId, ProjectId


class InMemoryStore:
    """Tables shared by the in-memory repositories of one container.

    Entities are immutable, so a snapshot is a shallow copy of each table.
    """

    def __init__(self) -> None:
        self.projects: dict[ProjectId, Project] = {}
        self.pages: dict[PageId, Page] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.commenters: dict[str, Commenter] = {}

    def snapshot(self) -> tuple[dict, dict, dict, dict]:
        return (
            dict(self.projects),
            dict(self.pages),
            dict(self.comments),
            dict(self.commenters),
        )

    def restore(self, snapshot: tuple[dict, dict, dict, dict]) -> None:
        self.projects, self.pages, self.comments, self.commenters = (
            dict(table) for table in snapshot
        )
