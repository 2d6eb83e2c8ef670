"""In-memory subscription repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from specdit.domain.model.subscription import Subscription
from specdit.domain.repository.subscription import SubscriptionRepository
from specdit.domain.value import SubredditId, SubscriptionId, UserId

from .store import InMemoryStore


class InMemorySubscriptionRepository(SubscriptionRepository):
    """In-memory implementation of SubscriptionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_subreddit(
        self, user_id: UserId, subreddit_id: SubredditId
    ) -> Optional[Subscription]:
        """Find a user's subscription to one subreddit."""
        for subscription in self._store.subscriptions.values():
            if (
                subscription.user_id == user_id
                and subscription.subreddit_id == subreddit_id
            ):
                return subscription
        return None

    async def find_by_user(self, user_id: UserId) -> list[Subscription]:
        """Find all subscriptions of a user."""
        return [
            s for s in self._store.subscriptions.values() if s.user_id == user_id
        ]

    async def find_by_subreddit(self, subreddit_id: SubredditId) -> list[Subscription]:
        """Find all subscriptions to a subreddit."""
        return [
            s
            for s in self._store.subscriptions.values()
            if s.subreddit_id == subreddit_id
        ]

    async def save(self, subscription: Subscription) -> Subscription:
        """Save a subscription.

        Raises:
            IntegrityError: If the user is already subscribed
        """
        if await self.find_by_user_and_subreddit(
            subscription.user_id, subscription.subreddit_id
        ):
            raise IntegrityError("Duplicate subscription", None, Exception())

        saved = subscription.model_copy(
            update={"id": SubscriptionId(self._store.next_id("subscriptions"))}
        )
        self._store.subscriptions[saved.id] = saved
        return saved

    async def delete_by_user_and_subreddit(
        self, user_id: UserId, subreddit_id: SubredditId
    ) -> bool:
        """Delete a subscription."""
        existing = await self.find_by_user_and_subreddit(user_id, subreddit_id)
        if not existing:
            return False
        del self._store.subscriptions[existing.id]
        return True
