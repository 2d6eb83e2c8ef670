"""Helpers for seeding the in-memory store in unit tests."""

from datetime import datetime

from specdit.domain.model import Comment, Post, Subreddit, User
from specdit.domain.repository import (
    CommentRepository,
    PostRepository,
    SubredditRepository,
    UserRepository,
)
from specdit.domain.value import CommentId, PostId, SubredditId, UserId


async def seed_user(env, email: str = "alice@example.com") -> User:
    repo = await env.get(UserRepository)
    return await repo.save(
        User(
            email=email,
            username=email.split("@")[0],
            hashed_password="not-a-real-hash",
        )
    )


async def seed_subreddit(env, creator_id: UserId, name: str = "python") -> Subreddit:
    repo = await env.get(SubredditRepository)
    return await repo.save(Subreddit(name=name, creator_id=creator_id))


async def seed_post(
    env,
    author_id: UserId,
    subreddit_id: SubredditId,
    title: str = "Hello",
    created_at: datetime | None = None,
) -> Post:
    repo = await env.get(PostRepository)
    post = Post(
        title=title, content="Body", author_id=author_id, subreddit_id=subreddit_id
    )
    if created_at is not None:
        post = post.model_copy(update={"created_at": created_at})
    return await repo.save(post)


async def seed_comment(
    env,
    post_id: PostId,
    author_id: UserId,
    text: str = "Nice",
    reply_to_id: CommentId | None = None,
    created_at: datetime | None = None,
) -> Comment:
    repo = await env.get(CommentRepository)
    comment = Comment(
        post_id=post_id, author_id=author_id, text=text, reply_to_id=reply_to_id
    )
    if created_at is not None:
        comment = comment.model_copy(update={"created_at": created_at})
    return await repo.save(comment)


async def seed_thread(env):
    """A user, a subreddit and a post by that user."""
    user = await seed_user(env)
    subreddit = await seed_subreddit(env, user.id)
    post = await seed_post(env, user.id, subreddit.id)
    return user, subreddit, post
