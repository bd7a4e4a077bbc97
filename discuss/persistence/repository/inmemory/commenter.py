"""In-memory commenter repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from discuss.domain.model.commenter import Commenter
from discuss.domain.repository.commenter import CommenterRepository

from .store import InMemoryStore


class InMemoryCommenterRepository(CommenterRepository):
    """In-memory implementation of CommenterRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_email(self, email: str) -> Optional[Commenter]:
        """Find the verification record for an email."""
        return self.store.commenters.get(email)

    async def find_by_emails(self, emails: Sequence[str]) -> list[Commenter]:
        """Find verification records for several emails."""
        return [
            self.store.commenters[email]
            for email in dict.fromkeys(emails)
            if email in self.store.commenters
        ]

    async def upsert(self, email: str, verified_at: datetime) -> Commenter:
        """Create or update the record for an email."""
        existing = self.store.commenters.get(email)
        if existing:
            commenter = existing.model_copy(update={"verified_at": verified_at})
        else:
            commenter = Commenter(email=email, verified_at=verified_at)
        self.store.commenters[email] = commenter
        return commenter
