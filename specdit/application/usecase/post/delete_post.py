"""Delete post use case."""

from pydantic import BaseModel

from specdit.domain.service import PostService, VoteService
from specdit.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    user_id: int


class DeletePostUseCase:
    """Use case for deleting a post with its comments."""

    def __init__(self, post_service: PostService, vote_service: VoteService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.vote_service = vote_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Delete the post, its comments and every vote on them.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller isn't the author
        """
        post = await self.post_service.get_owned_post(
            PostId(request.post_id), UserId(request.user_id)
        )
        await self.vote_service.purge_votes_for_posts([post.id])
        await self.post_service.delete_post(post.id)
