"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, alias, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hub.config import Settings
from hub.domain.repository import (
    CommitHooks,
    MembershipRepository,
    ProjectRepository,
    TokenRepository,
    UserRepository,
)
from hub.persistence.commit_hooks import DeferredCommitHooks
from hub.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from hub.persistence.repository import (
    PostgresMembershipRepository,
    PostgresProjectRepository,
    PostgresTokenRepository,
    PostgresUserRepository,
)
from hub.util.di.base import ProviderBase
from hub.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL, one transaction per request."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    commit_hooks = provide(DeferredCommitHooks, scope=Scope.REQUEST)
    commit_hooks_port = alias(source=DeferredCommitHooks, provides=CommitHooks)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        hooks: DeferredCommitHooks,
    ) -> AsyncIterator[AsyncSession]:
        """Request-wide transaction, committed when the request scope closes.

        Commit hooks, such as invitation emails, run after the commit.
        """
        async with transaction(session_factory, hooks) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, session: AsyncSession) -> ProjectRepository:
        return PostgresProjectRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_membership_repository(
        self, session: AsyncSession
    ) -> MembershipRepository:
        return PostgresMembershipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_token_repository(self, session: AsyncSession) -> TokenRepository:
        return PostgresTokenRepository(session)
