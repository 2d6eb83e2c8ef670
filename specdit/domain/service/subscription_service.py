"""Subscription domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from specdit.domain.error import ConflictError, NotFoundError
from specdit.domain.model import Subscription
from specdit.domain.repository import SubscriptionRepository
from specdit.domain.value import SubredditId, UserId

from .base import Service
from .subreddit_service import SubredditService


class SubscriptionService(Service):
    """Domain service for subscription operations."""

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        subreddit_service: SubredditService,
    ) -> None:
        """Initialize subscription service.

        Args:
            subscription_repository: Subscription repository
            subreddit_service: Subreddit domain service
        """
        self.subscription_repository = subscription_repository
        self.subreddit_service = subreddit_service

    async def subscribe(
        self, user_id: UserId, subreddit_id: SubredditId
    ) -> Subscription:
        """Subscribe a user to a subreddit.

        Raises:
            NotFoundError: If the subreddit doesn't exist
            ConflictError: If the user is already subscribed
        """
        with logfire.span(
            "subscription_service.subscribe",
            user_id=user_id,
            subreddit_id=subreddit_id,
        ):
            await self.subreddit_service.get_subreddit(subreddit_id)

            existing = await self.subscription_repository.find_by_user_and_subreddit(
                user_id, subreddit_id
            )
            if existing:
                logfire.warn(
                    "Duplicate subscription",
                    user_id=user_id,
                    subreddit_id=subreddit_id,
                )
                raise ConflictError("Already subscribed to this subreddit")

            try:
                saved = await self.subscription_repository.save(
                    Subscription(user_id=user_id, subreddit_id=subreddit_id)
                )
            except IntegrityError:
                logfire.warn(
                    "Concurrent duplicate subscription",
                    user_id=user_id,
                    subreddit_id=subreddit_id,
                )
                raise ConflictError("Already subscribed to this subreddit")

            logfire.info(
                "Subscribed", user_id=user_id, subreddit_id=subreddit_id
            )
            return saved

    async def unsubscribe(self, user_id: UserId, subreddit_id: SubredditId) -> None:
        """Remove a user's subscription.

        Raises:
            NotFoundError: If the user isn't subscribed
        """
        with logfire.span(
            "subscription_service.unsubscribe",
            user_id=user_id,
            subreddit_id=subreddit_id,
        ):
            deleted = await self.subscription_repository.delete_by_user_and_subreddit(
                user_id, subreddit_id
            )
            if not deleted:
                logfire.warn(
                    "Unsubscribe without subscription",
                    user_id=user_id,
                    subreddit_id=subreddit_id,
                )
                raise NotFoundError("Subscription", str(subreddit_id))
            logfire.info("Unsubscribed", user_id=user_id, subreddit_id=subreddit_id)

    async def list_for_user(self, user_id: UserId) -> list[Subscription]:
        """List a user's subscriptions."""
        return await self.subscription_repository.find_by_user(user_id)

    async def list_for_subreddit(self, subreddit_id: SubredditId) -> list[Subscription]:
        """List subscriptions to a subreddit."""
        return await self.subscription_repository.find_by_subreddit(subreddit_id)
