"""PostgreSQL implementation of Subreddit repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from specdit.domain.model import Subreddit
from specdit.domain.repository import SubredditRepository
from specdit.domain.value import SubredditId
from specdit.persistence.mappers import row_to_subreddit, subreddit_to_dict
from specdit.persistence.tables import subreddits_table


class PostgresSubredditRepository(SubredditRepository):
    """PostgreSQL implementation of SubredditRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID."""
        stmt = select(subreddits_table).where(subreddits_table.c.id == subreddit_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_subreddit(row._asdict()) if row else None

    async def find_by_ids(
        self, subreddit_ids: Sequence[SubredditId]
    ) -> List[Subreddit]:
        """Find several subreddits at once (batch query)."""
        if not subreddit_ids:
            return []
        stmt = select(subreddits_table).where(
            subreddits_table.c.id.in_(subreddit_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_subreddit(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Subreddit]:
        """Find every subreddit, oldest first."""
        stmt = select(subreddits_table).order_by(
            subreddits_table.c.created_at, subreddits_table.c.id
        )
        result = await self.session.execute(stmt)
        return [row_to_subreddit(row._asdict()) for row in result.fetchall()]

    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save a subreddit (create or update)."""
        subreddit_dict = subreddit_to_dict(subreddit)

        if subreddit.id is None:
            stmt = (
                insert(subreddits_table)
                .values(**subreddit_dict)
                .returning(subreddits_table.c.id)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return subreddit.model_copy(
                update={"id": SubredditId(result.scalar_one())}
            )

        stmt = (
            update(subreddits_table)
            .where(subreddits_table.c.id == subreddit.id)
            .values(**subreddit_dict)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return subreddit

    async def delete(self, subreddit_id: SubredditId) -> None:
        """Delete a subreddit.

        Posts, their comments and subscriptions go with it (ON DELETE CASCADE).
        """
        stmt = delete(subreddits_table).where(subreddits_table.c.id == subreddit_id)
        await self.session.execute(stmt)
        await self.session.flush()
