"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .ranking import CommentNode, rank_comment_tree
from .subreddit_service import SubredditService
from .subscription_service import SubscriptionService
from .user_service import UserService
from .vote_service import VotedItem, VoteService

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "PostService",
    "Service",
    "SubredditService",
    "SubscriptionService",
    "UserService",
    "VotedItem",
    "VoteService",
    "rank_comment_tree",
]
