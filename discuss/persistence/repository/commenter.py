"""PostgreSQL implementation of Commenter repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Commenter
from discuss.domain.repository import CommenterRepository
from discuss.persistence.mappers import row_to_commenter
from discuss.persistence.tables import commenters_table


class PostgresCommenterRepository(CommenterRepository):
    """PostgreSQL implementation of CommenterRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_email(self, email: str) -> Optional[Commenter]:
        """Find the verification record for an email."""
        stmt = select(commenters_table).where(commenters_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_commenter(dict(row)) if row else None

    async def find_by_emails(self, emails: Sequence[str]) -> List[Commenter]:
        """Find verification records for several emails in one lookup."""
        if not emails:
            return []

        stmt = select(commenters_table).where(
            commenters_table.c.email.in_(list(emails))
        )
        result = await self.session.execute(stmt)
        return [row_to_commenter(dict(row)) for row in result.mappings().all()]

    async def upsert(self, email: str, verified_at: datetime) -> Commenter:
        """Create or update the record for an email with a verification time.

        Uses INSERT ... ON CONFLICT so concurrent approvals of the same
        author never fail on the unique email.
        """
        stmt = (
            insert(commenters_table)
            .values(email=email, verified_at=verified_at)
            .on_conflict_do_update(
                index_elements=[commenters_table.c.email],
                set_={"verified_at": verified_at},
            )
            .returning(commenters_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_commenter(dict(row))
