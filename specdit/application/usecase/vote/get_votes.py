"""Get votes use case."""

from pydantic import BaseModel

from specdit.domain.error import NotFoundError
from specdit.domain.service import CommentService, PostService, VoteService
from specdit.domain.value import CommentId, PostId, Tally, VotableType


class GetVotesRequest(BaseModel):
    """Get votes request."""

    votable_type: VotableType
    votable_id: int


class GetVotesUseCase:
    """Use case for reading the tally of a post or comment."""

    def __init__(
        self,
        vote_service: VoteService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize get votes use case.

        Args:
            vote_service: Vote domain service
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.vote_service = vote_service
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetVotesRequest) -> Tally:
        """Execute get votes flow.

        Raises:
            NotFoundError: If the item doesn't exist
        """
        if request.votable_type == VotableType.POST:
            await self.post_service.get_post(PostId(request.votable_id))
        else:
            comment = await self.comment_service.get_comment_by_id(
                CommentId(request.votable_id)
            )
            if not comment:
                raise NotFoundError("Comment", str(request.votable_id))

        return await self.vote_service.tally(request.votable_type, request.votable_id)
