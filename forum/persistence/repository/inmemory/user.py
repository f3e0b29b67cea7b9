"""In-memory user repository for testing."""

from typing import Iterable

from forum.domain.model import PublicUser
from forum.domain.repository import UserRepository
from forum.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Counts batch calls so tests can assert lookups are not per comment.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()
        self.calls = 0

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[PublicUser]:
        """Find users by a batch of IDs."""
        self.calls += 1
        return [
            self.store.users[uid] for uid in set(user_ids) if uid in self.store.users
        ]
