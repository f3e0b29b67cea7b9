"""PostgreSQL implementation of DiscussionPreference repository."""

from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import DiscussionPreference
from forum.domain.repository import DiscussionPreferenceRepository
from forum.domain.value import DiscussionId, UserId
from forum.persistence.mappers import row_to_discussion_preference
from forum.persistence.tables import discussion_preferences_table


class PostgresDiscussionPreferenceRepository(DiscussionPreferenceRepository):
    """PostgreSQL implementation of DiscussionPreferenceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_for_users(
        self, user_ids: Iterable[UserId], discussion_id: DiscussionId
    ) -> List[DiscussionPreference]:
        """Find preferences of several users in one discussion."""
        ids = list(user_ids)
        if not ids:
            return []
        stmt = select(discussion_preferences_table).where(
            discussion_preferences_table.c.user_id.in_(ids),
            discussion_preferences_table.c.discussion_id == discussion_id,
        )
        result = await self.session.execute(stmt)
        return [
            row_to_discussion_preference(dict(row)) for row in result.mappings().all()
        ]
