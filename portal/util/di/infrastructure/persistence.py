"""WordPress database wiring."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from portal.config import Settings
from portal.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from portal.persistence.database import create_engine, create_session_factory
from portal.persistence.repository import (
    SqlArticleRepository,
    SqlCommentRepository,
    SqlUserRepository,
)
from portal.util.di.base import ProviderBase
from portal.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories behind the domain services; mocked in unit tests."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    __is_mock__ = False

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        A comment insert is committed only if the whole request succeeded.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide
    def get_article_repository(self, session: AsyncSession) -> ArticleRepository:
        return SqlArticleRepository(session)

    @provide
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return SqlCommentRepository(session)

    @provide
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return SqlUserRepository(session)
