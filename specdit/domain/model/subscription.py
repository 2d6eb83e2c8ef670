"""Subscription entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from specdit.domain.model.common import DomainModel
from specdit.domain.value import SubredditId, SubscriptionId, UserId


class Subscription(DomainModel):
    """A user's membership in a subreddit.

    One subscription per user per subreddit (unique constraint).
    """

    id: Optional[SubscriptionId] = None
    user_id: UserId
    subreddit_id: SubredditId
    created_at: datetime = Field(default_factory=datetime.now)
