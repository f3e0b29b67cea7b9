"""In-memory discussion preference repository for testing."""

from typing import Iterable

from forum.domain.model import DiscussionPreference
from forum.domain.repository import DiscussionPreferenceRepository
from forum.domain.value import DiscussionId, UserId

from .store import InMemoryStore


class InMemoryDiscussionPreferenceRepository(DiscussionPreferenceRepository):
    """In-memory implementation of DiscussionPreferenceRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()
        self.calls = 0

    async def find_for_users(
        self, user_ids: Iterable[UserId], discussion_id: DiscussionId
    ) -> list[DiscussionPreference]:
        """Find preferences of several users in one discussion."""
        self.calls += 1
        return [
            self.store.preferences[(uid, discussion_id)]
            for uid in set(user_ids)
            if (uid, discussion_id) in self.store.preferences
        ]
