"""Domain value objects for Specdit.

Value objects are immutable and defined by their values, not identity.
"""

import math
from enum import Enum

from pydantic import Field, computed_field

from specdit.domain.value.common import ValueObject


class VoteType(str, Enum):
    """Polarity of a vote."""

    UP = "UP"
    DOWN = "DOWN"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class VoteOutcome(str, Enum):
    """Which lifecycle transition a cast vote applied.

    RECORDED: no previous vote, one was created
    SWITCHED: previous vote had the opposite polarity and was flipped
    REMOVED: previous vote had the same polarity and was deleted
    """

    RECORDED = "recorded"
    SWITCHED = "switched"
    REMOVED = "removed"

    @property
    def is_recorded(self) -> bool:
        """Whether a vote from the voter exists after the transition."""
        return self is not VoteOutcome.REMOVED


class Tally(ValueObject):
    """Vote counts for one target.

    The score is always derived from the counts, never stored.
    """

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @computed_field
    @property
    def score(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvotes - self.downvotes


class PageRequest(ValueObject):
    """1-based page request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return (self.page - 1) * self.limit


class PageInfo(ValueObject):
    """Pagination metadata returned alongside a page of results."""

    page: int
    limit: int
    total_posts: int

    @computed_field
    @property
    def total_pages(self) -> int:
        """Number of pages for the current limit."""
        return math.ceil(self.total_posts / self.limit)

    @computed_field
    @property
    def has_more(self) -> bool:
        """Whether pages remain after this one."""
        return self.page * self.limit < self.total_posts
