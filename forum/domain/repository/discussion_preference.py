"""Discussion preference repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from forum.domain.model.discussion_preference import DiscussionPreference
from forum.domain.value import DiscussionId, UserId


class DiscussionPreferenceRepository(ABC):
    """Read access to per-discussion commenter preferences."""

    @abstractmethod
    async def find_for_users(
        self, user_ids: Iterable[UserId], discussion_id: DiscussionId
    ) -> List[DiscussionPreference]:
        """Find the preferences of several users in one discussion.

        Args:
            user_ids: Users to look up
            discussion_id: Discussion the preferences apply to

        Returns:
            Preferences found; users without a row are simply absent
        """
        pass
