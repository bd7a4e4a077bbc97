"""Commenter repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from discuss.domain.model.commenter import Commenter


class CommenterRepository(ABC):
    """Repository for Commenter verification records."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Commenter]:
        """Find the verification record for an email."""
        pass

    @abstractmethod
    async def find_by_emails(self, emails: Sequence[str]) -> list[Commenter]:
        """Find verification records for several emails in one lookup.

        Args:
            emails: Email addresses to look up

        Returns:
            Records that exist (emails without a record are absent)
        """
        pass

    @abstractmethod
    async def upsert(self, email: str, verified_at: datetime) -> Commenter:
        """Create or update the record for an email with a verification time.

        Args:
            email: Email address (unique key)
            verified_at: Verification timestamp to store

        Returns:
            The stored record
        """
        pass
