"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
PageId = NewType("PageId", UUID)
ProjectId = NewType("ProjectId", UUID)

# Dashboard account (project owner / moderator)
UserId = NewType("UserId", UUID)
