"""Post domain service."""

from datetime import datetime

import logfire

from specdit.domain.error import NotAuthorizedError, NotFoundError
from specdit.domain.model.post import Post
from specdit.domain.repository import PostRepository
from specdit.domain.value import PageInfo, PageRequest, PostId, SubredditId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        title: str,
        content: str | None,
        author_id: UserId,
        subreddit_id: SubredditId,
    ) -> Post:
        """Create a post.

        The caller checks that the subreddit exists.

        Args:
            title: Post title
            content: Optional body
            author_id: Author user ID
            subreddit_id: Owning subreddit

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            author_id=author_id,
            subreddit_id=subreddit_id,
        ):
            saved = await self.post_repository.save(
                Post(
                    title=title,
                    content=content,
                    author_id=author_id,
                    subreddit_id=subreddit_id,
                )
            )
            logfire.info("Post created", post_id=saved.id, title=title)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def get_posts_by_ids(self, post_ids: list[PostId]) -> dict[PostId, Post]:
        """Batch fetch posts keyed by ID."""
        if not post_ids:
            return {}
        posts = await self.post_repository.find_by_ids(list(set(post_ids)))
        return {post.id: post for post in posts}

    async def get_post_ids_for_subreddit(
        self, subreddit_id: SubredditId
    ) -> list[PostId]:
        """IDs of every post in a subreddit."""
        return await self.post_repository.find_ids_by_subreddit(subreddit_id)

    async def list_posts_by_author(
        self, author_id: UserId, page: PageRequest
    ) -> tuple[list[Post], PageInfo]:
        """List an author's posts, newest first, one page at a time.

        Args:
            author_id: Author user ID
            page: Page number and size

        Returns:
            Posts on the page and pagination metadata
        """
        with logfire.span(
            "post_service.list_posts_by_author",
            author_id=author_id,
            page=page.page,
            limit=page.limit,
        ):
            posts = await self.post_repository.find_by_author(
                author_id, limit=page.limit, offset=page.offset
            )
            total = await self.post_repository.count_by_author(author_id)
            logfire.info(
                "Posts listed for author",
                author_id=author_id,
                count=len(posts),
                total=total,
            )
            return posts, PageInfo(page=page.page, limit=page.limit, total_posts=total)

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        """Update a post's title and/or content.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span("post_service.update_post", post_id=post_id, user_id=user_id):
            post = await self.get_owned_post(post_id, user_id)

            changes: dict = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content

            saved = await self.post_repository.save(post.model_copy(update=changes))
            logfire.info("Post updated", post_id=post_id)
            return saved

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post and its comments.

        Ownership is checked with get_owned_post() beforehand; votes are
        purged by the vote service.
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=post_id)

    async def get_owned_post(self, post_id: PostId, user_id: UserId) -> Post:
        """Get a post and check the user wrote it.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        post = await self.get_post(post_id)
        if post.author_id != user_id:
            logfire.warn("Post change by non-author", post_id=post_id, user_id=user_id)
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post
