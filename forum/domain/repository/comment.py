"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.model.comment import Comment
from forum.domain.value import DiscussionId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_discussion(self, discussion_id: DiscussionId) -> List[Comment]:
        """Find every comment of a discussion as a flat list.

        No particular order is guaranteed; tree assembly and ordering
        happen in the domain layer.

        Args:
            discussion_id: The discussion ID

        Returns:
            All comments of the discussion, including unpublished ones
        """
        pass
