"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from forum.domain.model.user import PublicUser
from forum.domain.value import UserId


class UserRepository(ABC):
    """Read access to public user data."""

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[PublicUser]:
        """Find users by a batch of IDs in one round trip.

        Args:
            user_ids: User IDs to look up; unknown IDs are skipped

        Returns:
            Users found, in no particular order
        """
        pass
