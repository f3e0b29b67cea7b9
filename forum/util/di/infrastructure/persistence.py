"""PostgreSQL persistence component."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    CommentRepository,
    CredentialRepository,
    DiscussionPreferenceRepository,
    DiscussionRepository,
    UserRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresCredentialRepository,
    PostgresDiscussionPreferenceRepository,
    PostgresDiscussionRepository,
    PostgresUserRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable storage: provides every domain repository."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by one PostgreSQL session per request."""

    __is_mock__ = False

    scope = Scope.REQUEST

    discussions = provide(PostgresDiscussionRepository, provides=DiscussionRepository)
    comments = provide(PostgresCommentRepository, provides=CommentRepository)
    users = provide(PostgresUserRepository, provides=UserRepository)
    preferences = provide(
        PostgresDiscussionPreferenceRepository,
        provides=DiscussionPreferenceRepository,
    )
    credentials = provide(PostgresCredentialRepository, provides=CredentialRepository)

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine shared by the whole process, disposed on shutdown."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Session for one request.

        The API only reads, so the transaction is rolled back at the end.
        """
        async with session_factory() as session:
            try:
                yield session
            finally:
                await session.rollback()
