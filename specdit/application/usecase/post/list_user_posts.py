"""List user posts use case."""

from pydantic import BaseModel, Field, model_validator

from specdit.application.usecase.common import (
    PostView,
    ScoredPostView,
    SubredditSummary,
    UserSummary,
)
from specdit.domain.service import (
    PostService,
    SubredditService,
    UserService,
    VoteService,
)
from specdit.domain.value import PageInfo, PageRequest, UserId, VotableType


class ListUserPostsRequest(BaseModel):
    """List user posts request.

    Exactly one of user_id and username selects the author.
    """

    user_id: int | None = None
    username: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @model_validator(mode="after")
    def check_author(self) -> "ListUserPostsRequest":
        """Validate that exactly one author selector is provided."""
        if (self.user_id is None) == (self.username is None):
            raise ValueError("Provide either user_id or username")
        return self


class ListUserPostsResponse(BaseModel):
    """One page of an author's posts."""

    posts: list[ScoredPostView]
    pagination: PageInfo


class ListUserPostsUseCase:
    """Use case for paging through an author's posts with scores."""

    def __init__(
        self,
        post_service: PostService,
        subreddit_service: SubredditService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize list user posts use case.

        Args:
            post_service: Post domain service
            subreddit_service: Subreddit domain service
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.subreddit_service = subreddit_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: ListUserPostsRequest) -> ListUserPostsResponse:
        """Execute list user posts flow.

        Raises:
            NotFoundError: If the author doesn't exist
        """
        if request.username is not None:
            author = await self.user_service.get_by_username(request.username)
        else:
            author = await self.user_service.get_by_id(UserId(request.user_id))

        posts, page_info = await self.post_service.list_posts_by_author(
            author.id, PageRequest(page=request.page, limit=request.limit)
        )

        # Batch fetch tallies and subreddits (avoid N+1)
        tallies = await self.vote_service.tally_many(
            VotableType.POST, [p.id for p in posts]
        )
        subreddits = await self.subreddit_service.get_subreddits_by_ids(
            [p.subreddit_id for p in posts]
        )

        author_summary = UserSummary.from_user(author)
        return ListUserPostsResponse(
            posts=[
                ScoredPostView(
                    **PostView.from_post(post).model_dump(),
                    author=author_summary,
                    subreddit=(
                        SubredditSummary.from_subreddit(subreddits[post.subreddit_id])
                        if post.subreddit_id in subreddits
                        else None
                    ),
                    votes=tallies[post.id],
                )
                for post in posts
            ],
            pagination=page_info,
        )
