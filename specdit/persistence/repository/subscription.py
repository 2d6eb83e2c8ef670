"""PostgreSQL implementation of Subscription repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from specdit.domain.model import Subscription
from specdit.domain.repository import SubscriptionRepository
from specdit.domain.value import SubredditId, SubscriptionId, UserId
from specdit.persistence.mappers import row_to_subscription, subscription_to_dict
from specdit.persistence.tables import subscriptions_table


class PostgresSubscriptionRepository(SubscriptionRepository):
    """PostgreSQL implementation of SubscriptionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_subreddit(
        self, user_id: UserId, subreddit_id: SubredditId
    ) -> Optional[Subscription]:
        """Find a user's subscription to one subreddit."""
        stmt = select(subscriptions_table).where(
            and_(
                subscriptions_table.c.user_id == user_id,
                subscriptions_table.c.subreddit_id == subreddit_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_subscription(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Subscription]:
        """Find all subscriptions of a user."""
        stmt = (
            select(subscriptions_table)
            .where(subscriptions_table.c.user_id == user_id)
            .order_by(subscriptions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_subscription(row._asdict()) for row in result.fetchall()]

    async def find_by_subreddit(self, subreddit_id: SubredditId) -> List[Subscription]:
        """Find all subscriptions to a subreddit."""
        stmt = (
            select(subscriptions_table)
            .where(subscriptions_table.c.subreddit_id == subreddit_id)
            .order_by(subscriptions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_subscription(row._asdict()) for row in result.fetchall()]

    async def save(self, subscription: Subscription) -> Subscription:
        """Save a subscription (create)."""
        stmt = (
            insert(subscriptions_table)
            .values(**subscription_to_dict(subscription))
            .returning(subscriptions_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return subscription.model_copy(
            update={"id": SubscriptionId(result.scalar_one())}
        )

    async def delete_by_user_and_subreddit(
        self, user_id: UserId, subreddit_id: SubredditId
    ) -> bool:
        """Delete a subscription."""
        stmt = delete(subscriptions_table).where(
            and_(
                subscriptions_table.c.user_id == user_id,
                subscriptions_table.c.subreddit_id == subreddit_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
