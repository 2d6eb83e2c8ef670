"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .store import InMemoryStore
from .subreddit import InMemorySubredditRepository
from .subscription import InMemorySubscriptionRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemorySubredditRepository",
    "InMemorySubscriptionRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
