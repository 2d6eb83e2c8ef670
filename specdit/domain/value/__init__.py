"""Domain value objects for Specdit."""

from specdit.domain.value.identifiers import (
    CommentId,
    PostId,
    SubredditId,
    SubscriptionId,
    UserId,
    VoteId,
)
from specdit.domain.value.types import (
    PageInfo,
    PageRequest,
    Tally,
    VotableType,
    VoteOutcome,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "SubredditId",
    "SubscriptionId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "VoteType",
    "VotableType",
    "VoteOutcome",
    "Tally",
    "PageRequest",
    "PageInfo",
]
