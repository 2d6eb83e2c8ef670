"""Get post use case."""

from pydantic import BaseModel

from specdit.application.usecase.comment.get_comments import (
    CommentView,
    load_ranked_comments,
)
from specdit.application.usecase.common import (
    PostView,
    ScoredPostView,
    SubredditSummary,
    UserSummary,
)
from specdit.domain.service import (
    CommentService,
    PostService,
    SubredditService,
    UserService,
    VoteService,
)
from specdit.domain.value import PostId, VotableType


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostResponse(ScoredPostView):
    """Post with its tally and ranked comment tree."""

    comments: list[CommentView]


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(
        self,
        post_service: PostService,
        subreddit_service: SubredditService,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            subreddit_service: Subreddit domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.subreddit_service = subreddit_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))

        votes = await self.vote_service.tally(VotableType.POST, post.id)
        author = await self.user_service.find_by_id(post.author_id)
        subreddits = await self.subreddit_service.get_subreddits_by_ids(
            [post.subreddit_id]
        )
        subreddit = subreddits.get(post.subreddit_id)

        comments = await load_ranked_comments(
            post.id, self.comment_service, self.vote_service, self.user_service
        )

        return GetPostResponse(
            **PostView.from_post(post).model_dump(),
            author=UserSummary.from_user(author) if author else None,
            subreddit=SubredditSummary.from_subreddit(subreddit) if subreddit else None,
            votes=votes,
            comments=comments,
        )
