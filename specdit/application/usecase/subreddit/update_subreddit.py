"""Update subreddit use case."""

from pydantic import BaseModel, Field

from specdit.application.usecase.common import SubredditView
from specdit.domain.service import SubredditService
from specdit.domain.value import SubredditId, UserId


class UpdateSubredditRequest(BaseModel):
    """Update subreddit request."""

    subreddit_id: int
    name: str = Field(min_length=1, max_length=100)
    user_id: int


class UpdateSubredditUseCase:
    """Use case for renaming a subreddit."""

    def __init__(self, subreddit_service: SubredditService) -> None:
        self.subreddit_service = subreddit_service

    async def execute(self, request: UpdateSubredditRequest) -> SubredditView:
        """Rename the subreddit.

        Raises:
            NotFoundError: If the subreddit doesn't exist
            NotAuthorizedError: If the caller isn't the creator
            ConflictError: If the new name is taken
        """
        subreddit = await self.subreddit_service.rename_subreddit(
            SubredditId(request.subreddit_id),
            request.name.strip(),
            UserId(request.user_id),
        )
        return SubredditView.from_subreddit(subreddit)
