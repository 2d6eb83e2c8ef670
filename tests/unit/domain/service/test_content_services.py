"""Unit tests for subreddit, subscription, post and comment services."""

from datetime import datetime

import pytest

from specdit.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from specdit.domain.repository import CommentRepository, PostRepository
from specdit.domain.service import (
    CommentService,
    PostService,
    SubredditService,
    SubscriptionService,
)
from specdit.domain.value import PageRequest, SubredditId
from tests.harness import create_env_fixture
from tests.unit.seed import (
    seed_comment,
    seed_post,
    seed_subreddit,
    seed_thread,
    seed_user,
)

unit_env = create_env_fixture()


class TestSubredditService:
    """Tests for SubredditService."""

    @pytest.mark.asyncio
    async def test_duplicate_name_raises_conflict(self, unit_env):
        """Subreddit names are unique."""
        service = await unit_env.get(SubredditService)
        user = await seed_user(unit_env)
        await service.create_subreddit("python", user.id)

        with pytest.raises(ConflictError):
            await service.create_subreddit("python", user.id)

    @pytest.mark.asyncio
    async def test_rename_by_non_creator_is_rejected(self, unit_env):
        """Only the creator can rename."""
        service = await unit_env.get(SubredditService)
        creator = await seed_user(unit_env)
        other = await seed_user(unit_env, "mallory@example.com")
        subreddit = await service.create_subreddit("python", creator.id)

        with pytest.raises(NotAuthorizedError):
            await service.rename_subreddit(subreddit.id, "snakes", other.id)

    @pytest.mark.asyncio
    async def test_rename(self, unit_env):
        """The creator can rename."""
        service = await unit_env.get(SubredditService)
        creator = await seed_user(unit_env)
        subreddit = await service.create_subreddit("python", creator.id)

        renamed = await service.rename_subreddit(subreddit.id, "snakes", creator.id)

        assert renamed.name == "snakes"
        assert (await service.get_subreddit(subreddit.id)).name == "snakes"

    @pytest.mark.asyncio
    async def test_delete_cascades_to_posts(self, unit_env):
        """Deleting a subreddit removes its posts and their comments."""
        service = await unit_env.get(SubredditService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user, subreddit, post = await seed_thread(unit_env)
        comment = await seed_comment(unit_env, post.id, user.id)

        await service.delete_subreddit(subreddit.id, user.id)

        with pytest.raises(NotFoundError):
            await service.get_subreddit(subreddit.id)
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(comment.id) is None


class TestSubscriptionService:
    """Tests for SubscriptionService."""

    @pytest.mark.asyncio
    async def test_subscribe_and_list(self, unit_env):
        """A subscription shows up for the user and for the subreddit."""
        service = await unit_env.get(SubscriptionService)
        user = await seed_user(unit_env)
        subreddit = await seed_subreddit(unit_env, user.id)

        await service.subscribe(user.id, subreddit.id)

        assert [s.subreddit_id for s in await service.list_for_user(user.id)] == [
            subreddit.id
        ]
        assert [s.user_id for s in await service.list_for_subreddit(subreddit.id)] == [
            user.id
        ]

    @pytest.mark.asyncio
    async def test_subscribe_twice_raises_conflict(self, unit_env):
        """One subscription per user and subreddit."""
        service = await unit_env.get(SubscriptionService)
        user = await seed_user(unit_env)
        subreddit = await seed_subreddit(unit_env, user.id)
        await service.subscribe(user.id, subreddit.id)

        with pytest.raises(ConflictError):
            await service.subscribe(user.id, subreddit.id)

    @pytest.mark.asyncio
    async def test_subscribe_to_missing_subreddit(self, unit_env):
        """Subscribing to an unknown subreddit raises NotFoundError."""
        service = await unit_env.get(SubscriptionService)
        user = await seed_user(unit_env)

        with pytest.raises(NotFoundError):
            await service.subscribe(user.id, SubredditId(404))

    @pytest.mark.asyncio
    async def test_unsubscribe_without_subscription(self, unit_env):
        """Unsubscribing when not subscribed raises NotFoundError."""
        service = await unit_env.get(SubscriptionService)
        user = await seed_user(unit_env)
        subreddit = await seed_subreddit(unit_env, user.id)

        with pytest.raises(NotFoundError) as exc_info:
            await service.unsubscribe(user.id, subreddit.id)

        assert exc_info.value.resource == "Subscription"


class TestPostService:
    """Tests for PostService."""

    @pytest.mark.asyncio
    async def test_list_posts_by_author_paginates_newest_first(self, unit_env):
        """Pages are ordered newest first with pagination metadata."""
        service = await unit_env.get(PostService)
        user = await seed_user(unit_env)
        subreddit = await seed_subreddit(unit_env, user.id)
        posts = [
            await seed_post(
                unit_env,
                user.id,
                subreddit.id,
                title=f"Post {day}",
                created_at=datetime(2026, 1, day),
            )
            for day in range(1, 6)
        ]

        page, info = await service.list_posts_by_author(
            user.id, PageRequest(page=2, limit=2)
        )

        assert [p.id for p in page] == [posts[2].id, posts[1].id]
        assert info.total_posts == 5
        assert info.total_pages == 3
        assert info.has_more is True

    @pytest.mark.asyncio
    async def test_last_page_has_no_more(self, unit_env):
        """The last page reports has_more False."""
        service = await unit_env.get(PostService)
        user, _, _ = await seed_thread(unit_env)

        page, info = await service.list_posts_by_author(
            user.id, PageRequest(page=1, limit=10)
        )

        assert len(page) == 1
        assert info.has_more is False
        assert info.total_pages == 1

    @pytest.mark.asyncio
    async def test_update_by_non_author_is_rejected(self, unit_env):
        """Only the author can edit."""
        service = await unit_env.get(PostService)
        _, _, post = await seed_thread(unit_env)
        other = await seed_user(unit_env, "mallory@example.com")

        with pytest.raises(NotAuthorizedError):
            await service.update_post(post.id, other.id, title="Hijacked")

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields(self, unit_env):
        """Fields left as None are not changed."""
        service = await unit_env.get(PostService)
        user, _, post = await seed_thread(unit_env)

        updated = await service.update_post(post.id, user.id, title="New title")

        assert updated.title == "New title"
        assert updated.content == post.content


class TestCommentService:
    """Tests for CommentService."""

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent(self, unit_env):
        """Replying to an unknown comment raises NotFoundError."""
        service = await unit_env.get(CommentService)
        user, _, post = await seed_thread(unit_env)

        with pytest.raises(NotFoundError):
            await service.create_comment(post.id, user.id, "Hi", reply_to_id=404)

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_post(self, unit_env):
        """A parent from another post is a validation error."""
        service = await unit_env.get(CommentService)
        user, subreddit, post = await seed_thread(unit_env)
        other_post = await seed_post(unit_env, user.id, subreddit.id, title="Other")
        parent = await seed_comment(unit_env, other_post.id, user.id)

        with pytest.raises(ValidationError):
            await service.create_comment(post.id, user.id, "Hi", reply_to_id=parent.id)

    @pytest.mark.asyncio
    async def test_fetch_order(self, unit_env):
        """Top-level comments come newest first, then replies oldest first."""
        service = await unit_env.get(CommentService)
        user, _, post = await seed_thread(unit_env)
        first = await seed_comment(
            unit_env, post.id, user.id, created_at=datetime(2026, 1, 1)
        )
        second = await seed_comment(
            unit_env, post.id, user.id, created_at=datetime(2026, 1, 2)
        )
        early_reply = await seed_comment(
            unit_env,
            post.id,
            user.id,
            reply_to_id=first.id,
            created_at=datetime(2026, 1, 3),
        )
        late_reply = await seed_comment(
            unit_env,
            post.id,
            user.id,
            reply_to_id=first.id,
            created_at=datetime(2026, 1, 4),
        )

        comments = await service.get_comments_for_post(post.id)

        assert [c.id for c in comments] == [
            second.id,
            first.id,
            early_reply.id,
            late_reply.id,
        ]

    @pytest.mark.asyncio
    async def test_delete_returns_every_removed_id(self, unit_env):
        """Deleting a comment removes replies at any depth."""
        service = await unit_env.get(CommentService)
        user, _, post = await seed_thread(unit_env)
        root = await seed_comment(unit_env, post.id, user.id)
        reply = await seed_comment(unit_env, post.id, user.id, reply_to_id=root.id)
        nested = await seed_comment(unit_env, post.id, user.id, reply_to_id=reply.id)
        sibling = await seed_comment(unit_env, post.id, user.id)

        removed = await service.delete_comment(root.id)

        assert sorted(removed) == sorted([root.id, reply.id, nested.id])
        remaining = await service.get_comments_for_post(post.id)
        assert [c.id for c in remaining] == [sibling.id]

    @pytest.mark.asyncio
    async def test_delete_by_non_author_is_rejected(self, unit_env):
        """Only the author can delete."""
        service = await unit_env.get(CommentService)
        user, _, post = await seed_thread(unit_env)
        comment = await seed_comment(unit_env, post.id, user.id)
        other = await seed_user(unit_env, "mallory@example.com")

        with pytest.raises(NotAuthorizedError):
            await service.get_owned_comment(comment.id, other.id)
