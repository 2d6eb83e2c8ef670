"""Vote entity.

A vote is one user's standing opinion (up or down) on a post or comment.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from specdit.domain.model.common import DomainModel
from specdit.domain.value import UserId, VotableType, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Resubmitting the same polarity removes the vote
    - Submitting the opposite polarity flips it in place
    - Polymorphic reference to votable (post or comment)
    """

    id: Optional[VoteId] = None
    user_id: UserId
    votable_type: VotableType
    votable_id: int  # PostId or CommentId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
