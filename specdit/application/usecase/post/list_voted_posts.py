"""List voted posts use case."""

from pydantic import BaseModel

from specdit.application.usecase.common import (
    PostView,
    ScoredPostView,
    SubredditSummary,
)
from specdit.domain.service import SubredditService, VoteService
from specdit.domain.value import UserId, VotableType, VoteType


class ListVotedPostsRequest(BaseModel):
    """List voted posts request."""

    user_id: int
    vote_type: VoteType | None = None


class VotedPostItem(ScoredPostView):
    """A post the caller voted on, with the caller's polarity."""

    user_vote_type: VoteType


class ListVotedPostsResponse(BaseModel):
    """List voted posts response."""

    posts: list[VotedPostItem]


class ListVotedPostsUseCase:
    """Use case for listing posts the caller voted on."""

    def __init__(
        self, vote_service: VoteService, subreddit_service: SubredditService
    ) -> None:
        """Initialize list voted posts use case.

        Args:
            vote_service: Vote domain service
            subreddit_service: Subreddit domain service
        """
        self.vote_service = vote_service
        self.subreddit_service = subreddit_service

    async def execute(self, request: ListVotedPostsRequest) -> ListVotedPostsResponse:
        """Execute list voted posts flow.

        Posts come newest first; votes on deleted posts are skipped.
        """
        items = await self.vote_service.votes_by_voter(
            UserId(request.user_id), VotableType.POST, request.vote_type
        )
        subreddits = await self.subreddit_service.get_subreddits_by_ids(
            [item.target.subreddit_id for item in items]
        )

        return ListVotedPostsResponse(
            posts=[
                VotedPostItem(
                    **PostView.from_post(item.target).model_dump(),
                    subreddit=(
                        SubredditSummary.from_subreddit(
                            subreddits[item.target.subreddit_id]
                        )
                        if item.target.subreddit_id in subreddits
                        else None
                    ),
                    votes=item.votes,
                    user_vote_type=item.vote_type,
                )
                for item in items
            ]
        )
