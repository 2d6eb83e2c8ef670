"""Subscribe use case."""

from datetime import datetime

from pydantic import BaseModel

from specdit.domain.service import SubscriptionService
from specdit.domain.value import SubredditId, UserId


class SubscribeRequest(BaseModel):
    """Subscribe request."""

    subreddit_id: int
    user_id: int


class SubscriptionResponse(BaseModel):
    """Subscription fields."""

    id: int
    user_id: int
    subreddit_id: int
    created_at: datetime


class SubscribeUseCase:
    """Use case for joining a subreddit."""

    def __init__(self, subscription_service: SubscriptionService) -> None:
        self.subscription_service = subscription_service

    async def execute(self, request: SubscribeRequest) -> SubscriptionResponse:
        """Subscribe the caller.

        Raises:
            NotFoundError: If the subreddit doesn't exist
            ConflictError: If already subscribed
        """
        subscription = await self.subscription_service.subscribe(
            UserId(request.user_id), SubredditId(request.subreddit_id)
        )
        return SubscriptionResponse(
            id=subscription.id,
            user_id=subscription.user_id,
            subreddit_id=subscription.subreddit_id,
            created_at=subscription.created_at,
        )
