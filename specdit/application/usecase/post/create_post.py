"""Create post use case."""

from pydantic import BaseModel, Field

from specdit.application.usecase.common import PostView
from specdit.domain.service import PostService, SubredditService
from specdit.domain.value import SubredditId, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=40000)
    subreddit_id: int
    user_id: int


class CreatePostUseCase:
    """Use case for posting into a subreddit."""

    def __init__(
        self, post_service: PostService, subreddit_service: SubredditService
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            subreddit_service: Subreddit domain service
        """
        self.post_service = post_service
        self.subreddit_service = subreddit_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Raises:
            NotFoundError: If the subreddit doesn't exist
        """
        subreddit = await self.subreddit_service.get_subreddit(
            SubredditId(request.subreddit_id)
        )
        post = await self.post_service.create_post(
            title=request.title.strip(),
            content=request.content,
            author_id=UserId(request.user_id),
            subreddit_id=subreddit.id,
        )
        return PostView.from_post(post)
