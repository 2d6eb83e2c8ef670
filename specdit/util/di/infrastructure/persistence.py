"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from specdit.config import Settings
from specdit.domain.repository import (
    CommentRepository,
    PostRepository,
    SubredditRepository,
    SubscriptionRepository,
    UserRepository,
    VoteRepository,
)
from specdit.persistence.database import (
    TransactionOutcome,
    create_engine,
    create_session_factory,
)
from specdit.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresSubredditRepository,
    PostgresSubscriptionRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from specdit.util.di.base import ProviderBase
from specdit.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        outcome: TransactionOutcome,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is rolled back if the request raised or if its outcome
        was marked failed (a route that answered with an error), and
        committed otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

            if outcome.failed:
                logfire.warn(
                    "Session rollback after failed request", reason=outcome.reason
                )
                await session.rollback()
                return

            await session.commit()
            logfire.debug("Session committed")

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subreddit_repository(self, session: AsyncSession) -> SubredditRepository:
        """Provide Subreddit repository."""
        return PostgresSubredditRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subscription_repository(
        self, session: AsyncSession
    ) -> SubscriptionRepository:
        """Provide Subscription repository."""
        return PostgresSubscriptionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)
