"""In-memory comment repository for testing."""

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import DiscussionId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()
        self.calls = 0

    async def find_by_discussion(self, discussion_id: DiscussionId) -> list[Comment]:
        """Find all comments of a discussion in insertion order."""
        self.calls += 1
        return [
            c for c in self.store.comments.values() if c.discussion_id == discussion_id
        ]
