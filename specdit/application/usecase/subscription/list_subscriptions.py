"""List subscriptions use case."""

from datetime import datetime

from pydantic import BaseModel

from specdit.application.usecase.common import SubredditSummary
from specdit.domain.service import SubredditService, SubscriptionService
from specdit.domain.value import UserId


class ListSubscriptionsRequest(BaseModel):
    """List subscriptions request."""

    user_id: int


class SubscriptionItem(BaseModel):
    """A subscription with the subreddit it points at."""

    id: int
    subreddit_id: int
    created_at: datetime
    subreddit: SubredditSummary


class ListSubscriptionsResponse(BaseModel):
    """List subscriptions response."""

    subscriptions: list[SubscriptionItem]


class ListSubscriptionsUseCase:
    """Use case for listing the caller's subscriptions."""

    def __init__(
        self,
        subscription_service: SubscriptionService,
        subreddit_service: SubredditService,
    ) -> None:
        """Initialize list subscriptions use case.

        Args:
            subscription_service: Subscription domain service
            subreddit_service: Subreddit domain service
        """
        self.subscription_service = subscription_service
        self.subreddit_service = subreddit_service

    async def execute(
        self, request: ListSubscriptionsRequest
    ) -> ListSubscriptionsResponse:
        subscriptions = await self.subscription_service.list_for_user(
            UserId(request.user_id)
        )
        subreddits = await self.subreddit_service.get_subreddits_by_ids(
            [s.subreddit_id for s in subscriptions]
        )
        return ListSubscriptionsResponse(
            subscriptions=[
                SubscriptionItem(
                    id=s.id,
                    subreddit_id=s.subreddit_id,
                    created_at=s.created_at,
                    subreddit=SubredditSummary.from_subreddit(
                        subreddits[s.subreddit_id]
                    ),
                )
                for s in subscriptions
                if s.subreddit_id in subreddits
            ]
        )
