"""Discussion repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.discussion import Discussion
from forum.domain.value import DiscussionId


class DiscussionRepository(ABC):
    """Repository for Discussion aggregate."""

    @abstractmethod
    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID.

        Args:
            discussion_id: The discussion's unique identifier

        Returns:
            The discussion if found, None otherwise
        """
        pass
