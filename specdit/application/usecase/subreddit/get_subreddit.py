"""Get subreddit use case."""

from datetime import datetime

from pydantic import BaseModel

from specdit.application.usecase.common import SubredditView, UserSummary
from specdit.domain.service import SubredditService, SubscriptionService, UserService
from specdit.domain.value import SubredditId


class GetSubredditRequest(BaseModel):
    """Get subreddit request."""

    subreddit_id: int


class SubscriberView(BaseModel):
    """One subscriber of a subreddit."""

    user_id: int
    username: str
    name: str | None
    subscribed_at: datetime


class GetSubredditResponse(SubredditView):
    """Subreddit with its creator and subscribers."""

    creator: UserSummary | None
    subscribers: list[SubscriberView]


class GetSubredditUseCase:
    """Use case for loading a subreddit with its members."""

    def __init__(
        self,
        subreddit_service: SubredditService,
        subscription_service: SubscriptionService,
        user_service: UserService,
    ) -> None:
        """Initialize get subreddit use case.

        Args:
            subreddit_service: Subreddit domain service
            subscription_service: Subscription domain service
            user_service: User domain service
        """
        self.subreddit_service = subreddit_service
        self.subscription_service = subscription_service
        self.user_service = user_service

    async def execute(self, request: GetSubredditRequest) -> GetSubredditResponse:
        """Load the subreddit.

        Raises:
            NotFoundError: If the subreddit doesn't exist
        """
        subreddit = await self.subreddit_service.get_subreddit(
            SubredditId(request.subreddit_id)
        )
        subscriptions = await self.subscription_service.list_for_subreddit(
            subreddit.id
        )

        # Batch fetch creator and subscribers (avoid N+1)
        users = await self.user_service.get_users_by_ids(
            [subreddit.creator_id, *(s.user_id for s in subscriptions)]
        )
        creator = users.get(subreddit.creator_id)

        subscribers = [
            SubscriberView(
                user_id=s.user_id,
                username=users[s.user_id].username,
                name=users[s.user_id].name,
                subscribed_at=s.created_at,
            )
            for s in subscriptions
            if s.user_id in users
        ]

        return GetSubredditResponse(
            **SubredditView.from_subreddit(subreddit).model_dump(),
            creator=UserSummary.from_user(creator) if creator else None,
            subscribers=subscribers,
        )
