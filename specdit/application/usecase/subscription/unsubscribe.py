"""Unsubscribe use case."""

from pydantic import BaseModel

from specdit.domain.service import SubscriptionService
from specdit.domain.value import SubredditId, UserId


class UnsubscribeRequest(BaseModel):
    """Unsubscribe request."""

    subreddit_id: int
    user_id: int


class UnsubscribeUseCase:
    """Use case for leaving a subreddit."""

    def __init__(self, subscription_service: SubscriptionService) -> None:
        self.subscription_service = subscription_service

    async def execute(self, request: UnsubscribeRequest) -> None:
        """Unsubscribe the caller.

        Raises:
            NotFoundError: If the caller isn't subscribed
        """
        await self.subscription_service.unsubscribe(
            UserId(request.user_id), SubredditId(request.subreddit_id)
        )
