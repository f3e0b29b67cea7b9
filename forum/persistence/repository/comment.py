"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import DiscussionId
from forum.persistence.mappers import row_to_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_discussion(self, discussion_id: DiscussionId) -> List[Comment]:
        """Find every comment of a discussion in one query."""
        stmt = select(comments_table).where(
            comments_table.c.discussion_id == discussion_id
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]
