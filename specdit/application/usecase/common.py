"""Response views shared by several use cases.

Identifiers are internal integers here; the interface layer encodes them
before they leave the service.
"""

from datetime import datetime

from pydantic import BaseModel

from specdit.domain.model import Post, Subreddit, User
from specdit.domain.value import Tally


class UserView(BaseModel):
    """The authenticated user's own account."""

    id: int
    email: str
    username: str
    name: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            name=user.name,
            created_at=user.created_at,
        )


class UserSummary(BaseModel):
    """Public view of another user."""

    id: int
    username: str
    name: str | None

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(id=user.id, username=user.username, name=user.name)


class SubredditView(BaseModel):
    """Subreddit fields."""

    id: int
    name: str
    creator_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_subreddit(cls, subreddit: Subreddit) -> "SubredditView":
        return cls(
            id=subreddit.id,
            name=subreddit.name,
            creator_id=subreddit.creator_id,
            created_at=subreddit.created_at,
            updated_at=subreddit.updated_at,
        )


class SubredditSummary(BaseModel):
    """Subreddit reference embedded in other views."""

    id: int
    name: str

    @classmethod
    def from_subreddit(cls, subreddit: Subreddit) -> "SubredditSummary":
        return cls(id=subreddit.id, name=subreddit.name)


class PostView(BaseModel):
    """Post fields."""

    id: int
    title: str
    content: str | None
    author_id: int
    subreddit_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostView":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            subreddit_id=post.subreddit_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class ScoredPostView(PostView):
    """Post with its live tally and who wrote it where."""

    author: UserSummary | None = None
    subreddit: SubredditSummary | None = None
    votes: Tally
