"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    CommentRepository,
    CredentialRepository,
    DiscussionPreferenceRepository,
    DiscussionRepository,
    UserRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryCredentialRepository,
    InMemoryDiscussionPreferenceRepository,
    InMemoryDiscussionRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives for the whole container so tests can seed it and then
    issue requests. Repositories are REQUEST-scoped views onto it.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_discussion_repository(self, store: InMemoryStore) -> DiscussionRepository:
        """Provide in-memory discussion repository."""
        return InMemoryDiscussionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_discussion_preference_repository(
        self, store: InMemoryStore
    ) -> DiscussionPreferenceRepository:
        """Provide in-memory discussion preference repository."""
        return InMemoryDiscussionPreferenceRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_credential_repository(self, store: InMemoryStore) -> CredentialRepository:
        """Provide in-memory credential repository."""
        return InMemoryCredentialRepository(store)
