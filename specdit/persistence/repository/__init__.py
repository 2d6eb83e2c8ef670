"""PostgreSQL repository implementations."""

from specdit.persistence.repository.comment import PostgresCommentRepository
from specdit.persistence.repository.post import PostgresPostRepository
from specdit.persistence.repository.subreddit import PostgresSubredditRepository
from specdit.persistence.repository.subscription import PostgresSubscriptionRepository
from specdit.persistence.repository.user import PostgresUserRepository
from specdit.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresSubredditRepository",
    "PostgresSubscriptionRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
