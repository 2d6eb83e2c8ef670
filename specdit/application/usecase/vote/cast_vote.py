"""Cast vote use case."""

from pydantic import BaseModel

from specdit.domain.service import VoteService
from specdit.domain.value import Tally, UserId, VotableType, VoteOutcome, VoteType

_MESSAGES = {
    VoteOutcome.RECORDED: "Vote recorded successfully",
    VoteOutcome.SWITCHED: "Vote updated successfully",
    VoteOutcome.REMOVED: "Vote removed successfully",
}


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_id: int  # From authenticated user
    votable_type: VotableType
    votable_id: int
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    outcome: VoteOutcome
    message: str
    votes: Tally


class CastVoteUseCase:
    """Use case for voting on a post or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        The tally is read after the vote row changed, in the same
        transaction, so it reflects the caller's vote.

        Args:
            request: Cast vote request

        Returns:
            Applied transition and the item's new tally

        Raises:
            NotFoundError: If the item doesn't exist
            ConflictError: If a concurrent vote from the same user won
        """
        outcome = await self.vote_service.cast_vote(
            voter_id=UserId(request.user_id),
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            vote_type=request.vote_type,
        )
        votes = await self.vote_service.tally(request.votable_type, request.votable_id)
        return CastVoteResponse(
            outcome=outcome, message=_MESSAGES[outcome], votes=votes
        )
