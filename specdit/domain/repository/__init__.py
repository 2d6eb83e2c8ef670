"""Repository interfaces for Specdit domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from specdit.domain.repository.comment import CommentRepository
from specdit.domain.repository.post import PostRepository
from specdit.domain.repository.subreddit import SubredditRepository
from specdit.domain.repository.subscription import SubscriptionRepository
from specdit.domain.repository.user import UserRepository
from specdit.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "SubredditRepository",
    "SubscriptionRepository",
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
]
