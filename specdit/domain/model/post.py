"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from specdit.domain.model.common import DomainModel
from specdit.domain.value import PostId, SubredditId, UserId


class Post(DomainModel):
    """Post aggregate root.

    A post belongs to one subreddit and one author. Its score is not stored
    here; it is derived from the vote ledger when a response is built.
    """

    id: Optional[PostId] = None
    title: str = Field(min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, max_length=40000)
    author_id: UserId
    subreddit_id: SubredditId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
