"""Delete comment use case."""

from pydantic import BaseModel

from specdit.domain.service import CommentService, VoteService
from specdit.domain.value import CommentId, UserId, VotableType


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: int


class DeleteCommentUseCase:
    """Use case for deleting a comment with its replies."""

    def __init__(
        self, comment_service: CommentService, vote_service: VoteService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Delete the comment, its replies and every vote on them.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller isn't the author
        """
        comment = await self.comment_service.get_owned_comment(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        removed_ids = await self.comment_service.delete_comment(comment.id)
        await self.vote_service.purge_votes(VotableType.COMMENT, removed_ids)
