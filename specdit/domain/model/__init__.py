"""Domain model entities for Specdit."""

from specdit.domain.model.comment import Comment
from specdit.domain.model.post import Post
from specdit.domain.model.subreddit import Subreddit
from specdit.domain.model.subscription import Subscription
from specdit.domain.model.user import User
from specdit.domain.model.vote import Vote

__all__ = [
    "User",
    "Subreddit",
    "Subscription",
    "Post",
    "Comment",
    "Vote",
]
