"""In-memory credential repository for testing."""

from typing import Iterable

from forum.domain.model import Credential
from forum.domain.repository import CredentialRepository
from forum.domain.value import CredentialId

from .store import InMemoryStore


class InMemoryCredentialRepository(CredentialRepository):
    """In-memory implementation of CredentialRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()
        self.calls = 0

    async def find_by_ids(
        self, credential_ids: Iterable[CredentialId]
    ) -> list[Credential]:
        """Find credentials by a batch of IDs."""
        self.calls += 1
        return [
            self.store.credentials[cid]
            for cid in set(credential_ids)
            if cid in self.store.credentials
        ]
