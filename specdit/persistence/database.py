"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from specdit.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Every statement runs under a server-side timeout. A statement that
    times out raises and the request fails; nothing is retried.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    timeout_ms = settings.database.statement_timeout_ms
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={
            "server_settings": {"statement_timeout": str(timeout_ms)},
            # Client-side cutoff slightly above the server one
            "command_timeout": timeout_ms / 1000 + 1,
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )



class TransactionOutcome:
    """Whether the work done in one request may be committed.

    The request session commits at the end of the request unless something
    marked the outcome failed, e.g. a route that answered with an error
    after it had already written.
    """

    def __init__(self) -> None:
        self.failed = False
        self.reason: str | None = None

    def mark_failed(self, reason: str) -> None:
        self.failed = True
        self.reason = reason
