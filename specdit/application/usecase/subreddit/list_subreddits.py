"""List subreddits use case."""

from pydantic import BaseModel

from specdit.application.usecase.common import SubredditView
from specdit.domain.service import SubredditService


class ListSubredditsResponse(BaseModel):
    """List subreddits response."""

    subreddits: list[SubredditView]


class ListSubredditsUseCase:
    """Use case for listing every subreddit."""

    def __init__(self, subreddit_service: SubredditService) -> None:
        self.subreddit_service = subreddit_service

    async def execute(self) -> ListSubredditsResponse:
        subreddits = await self.subreddit_service.list_subreddits()
        return ListSubredditsResponse(
            subreddits=[SubredditView.from_subreddit(s) for s in subreddits]
        )
