"""List voted comments use case."""

from datetime import datetime

from pydantic import BaseModel

from specdit.domain.service import VoteService
from specdit.domain.value import Tally, UserId, VotableType, VoteType


class ListVotedCommentsRequest(BaseModel):
    """List voted comments request."""

    user_id: int
    vote_type: VoteType | None = None


class VotedCommentItem(BaseModel):
    """A comment the caller voted on."""

    id: int
    post_id: int
    author_id: int
    text: str
    reply_to_id: int | None
    created_at: datetime
    user_vote_type: VoteType
    votes: Tally


class ListVotedCommentsResponse(BaseModel):
    """List voted comments response."""

    comments: list[VotedCommentItem]


class ListVotedCommentsUseCase:
    """Use case for listing comments the caller voted on."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(
        self, request: ListVotedCommentsRequest
    ) -> ListVotedCommentsResponse:
        items = await self.vote_service.votes_by_voter(
            UserId(request.user_id), VotableType.COMMENT, request.vote_type
        )
        return ListVotedCommentsResponse(
            comments=[
                VotedCommentItem(
                    id=item.target.id,
                    post_id=item.target.post_id,
                    author_id=item.target.author_id,
                    text=item.target.text,
                    reply_to_id=item.target.reply_to_id,
                    created_at=item.target.created_at,
                    user_vote_type=item.vote_type,
                    votes=item.votes,
                )
                for item in items
            ]
        )
