"""Subscription repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from specdit.domain.model.subscription import Subscription
from specdit.domain.value import SubredditId, UserId


class SubscriptionRepository(ABC):
    """Repository for Subscription entity."""

    @abstractmethod
    async def find_by_user_and_subreddit(
        self, user_id: UserId, subreddit_id: SubredditId
    ) -> Optional[Subscription]:
        """Find a user's subscription to one subreddit.

        Args:
            user_id: The user's ID
            subreddit_id: The subreddit's ID

        Returns:
            The subscription if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Subscription]:
        """Find all subscriptions of a user."""
        pass

    @abstractmethod
    async def find_by_subreddit(self, subreddit_id: SubredditId) -> List[Subscription]:
        """Find all subscriptions to a subreddit."""
        pass

    @abstractmethod
    async def save(self, subscription: Subscription) -> Subscription:
        """Save a subscription (create).

        Raises:
            IntegrityError: If the user is already subscribed
        """
        pass

    @abstractmethod
    async def delete_by_user_and_subreddit(
        self, user_id: UserId, subreddit_id: SubredditId
    ) -> bool:
        """Delete a subscription.

        Returns:
            True if a subscription was deleted, False if none existed
        """
        pass
