"""Delete subreddit use case."""

from pydantic import BaseModel

from specdit.domain.service import PostService, SubredditService, VoteService
from specdit.domain.value import SubredditId, UserId


class DeleteSubredditRequest(BaseModel):
    """Delete subreddit request."""

    subreddit_id: int
    user_id: int


class DeleteSubredditUseCase:
    """Use case for deleting a subreddit and everything posted in it."""

    def __init__(
        self,
        subreddit_service: SubredditService,
        post_service: PostService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete subreddit use case.

        Args:
            subreddit_service: Subreddit domain service
            post_service: Post domain service
            vote_service: Vote domain service
        """
        self.subreddit_service = subreddit_service
        self.post_service = post_service
        self.vote_service = vote_service

    async def execute(self, request: DeleteSubredditRequest) -> None:
        """Delete the subreddit, its posts and comments, and their votes.

        Votes reference posts and comments without a foreign key, so they
        are purged before the rows they point at disappear.

        Raises:
            NotFoundError: If the subreddit doesn't exist
            NotAuthorizedError: If the caller isn't the creator
        """
        subreddit_id = SubredditId(request.subreddit_id)
        user_id = UserId(request.user_id)

        await self.subreddit_service.get_owned_subreddit(subreddit_id, user_id)

        post_ids = await self.post_service.get_post_ids_for_subreddit(subreddit_id)
        await self.vote_service.purge_votes_for_posts(post_ids)

        await self.subreddit_service.delete_subreddit(subreddit_id, user_id)
