"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from specdit.domain.model import Comment, Post, Subreddit, Subscription, User, Vote
from specdit.domain.value import (
    CommentId,
    PostId,
    SubredditId,
    SubscriptionId,
    UserId,
    VotableType,
    VoteId,
    VoteType,
)


def _to_dict(model: Any) -> Dict[str, Any]:
    """Dump a model for insert/update, leaving id out until it is assigned."""
    data = model.model_dump()
    if data.get("id") is None:
        data.pop("id", None)
    return data


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        username=row["username"],
        name=row.get("name"),
        hashed_password=row["hashed_password"],
        email_verified=row.get("email_verified"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return _to_dict(user)


def row_to_subreddit(row: Dict[str, Any]) -> Subreddit:
    """Convert database row to Subreddit domain model."""
    return Subreddit(
        id=SubredditId(row["id"]),
        name=row["name"],
        creator_id=UserId(row["creator_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def subreddit_to_dict(subreddit: Subreddit) -> Dict[str, Any]:
    """Convert Subreddit domain model to database dict."""
    return _to_dict(subreddit)


def row_to_subscription(row: Dict[str, Any]) -> Subscription:
    """Convert database row to Subscription domain model."""
    return Subscription(
        id=SubscriptionId(row["id"]),
        user_id=UserId(row["user_id"]),
        subreddit_id=SubredditId(row["subreddit_id"]),
        created_at=row["created_at"],
    )


def subscription_to_dict(subscription: Subscription) -> Dict[str, Any]:
    """Convert Subscription domain model to database dict."""
    return _to_dict(subscription)


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row.get("content"),
        author_id=UserId(row["author_id"]),
        subreddit_id=SubredditId(row["subreddit_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return _to_dict(post)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    reply_to_id = row.get("reply_to_id")
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        text=row["text"],
        reply_to_id=CommentId(reply_to_id) if reply_to_id is not None else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return _to_dict(comment)


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        votable_type=VotableType(row["votable_type"]),
        votable_id=row["votable_id"],
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Enums are stored by value.
    """
    data = _to_dict(vote)
    data["votable_type"] = vote.votable_type.value
    data["vote_type"] = vote.vote_type.value
    return data
