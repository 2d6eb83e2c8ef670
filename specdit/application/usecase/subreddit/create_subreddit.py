"""Create subreddit use case."""

from pydantic import BaseModel, Field

from specdit.application.usecase.common import SubredditView
from specdit.domain.service import SubredditService
from specdit.domain.value import UserId


class CreateSubredditRequest(BaseModel):
    """Create subreddit request."""

    name: str = Field(min_length=1, max_length=100)
    user_id: int


class CreateSubredditUseCase:
    """Use case for creating a subreddit."""

    def __init__(self, subreddit_service: SubredditService) -> None:
        """Initialize create subreddit use case.

        Args:
            subreddit_service: Subreddit domain service
        """
        self.subreddit_service = subreddit_service

    async def execute(self, request: CreateSubredditRequest) -> SubredditView:
        """Create the subreddit with the caller as creator.

        Raises:
            ConflictError: If the name is taken
        """
        subreddit = await self.subreddit_service.create_subreddit(
            name=request.name.strip(), creator_id=UserId(request.user_id)
        )
        return SubredditView.from_subreddit(subreddit)
