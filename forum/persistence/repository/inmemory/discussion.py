"""In-memory discussion repository for testing."""

from typing import Optional

from forum.domain.model import Discussion
from forum.domain.repository import DiscussionRepository
from forum.domain.value import DiscussionId

from .store import InMemoryStore


class InMemoryDiscussionRepository(DiscussionRepository):
    """In-memory implementation of DiscussionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID."""
        return self.store.discussions.get(discussion_id)
