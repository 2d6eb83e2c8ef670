"""Subreddit entity.

Subreddits are communities that group posts.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from specdit.domain.model.common import DomainModel
from specdit.domain.value import SubredditId, UserId


class Subreddit(DomainModel):
    """Subreddit entity.

    Business rules:
    - Names are unique (enforced by database unique constraint)
    - Only the creator can rename or delete a subreddit
    """

    id: Optional[SubredditId] = None
    name: str = Field(min_length=1, max_length=100)
    creator_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
