"""PostgreSQL implementation of Discussion repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Discussion
from forum.domain.repository import DiscussionRepository
from forum.domain.value import DiscussionId
from forum.persistence.mappers import row_to_discussion
from forum.persistence.tables import discussions_table


class PostgresDiscussionRepository(DiscussionRepository):
    """PostgreSQL implementation of DiscussionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID."""
        stmt = select(discussions_table).where(discussions_table.c.id == discussion_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_discussion(dict(row)) if row else None
