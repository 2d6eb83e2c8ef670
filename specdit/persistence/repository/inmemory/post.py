"""In-memory post repository for testing."""

from typing import Optional, Sequence

from specdit.domain.model.post import Post
from specdit.domain.repository.post import PostRepository
from specdit.domain.value import PostId, SubredditId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts at once."""
        return [
            self._store.posts[post_id]
            for post_id in post_ids
            if post_id in self._store.posts
        ]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts by author, newest first."""
        posts = [p for p in self._store.posts.values() if p.author_id == author_id]
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return posts[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts by author."""
        return sum(1 for p in self._store.posts.values() if p.author_id == author_id)

    async def find_ids_by_subreddit(self, subreddit_id: SubredditId) -> list[PostId]:
        """Find the IDs of every post in a subreddit."""
        return [
            post_id
            for post_id, post in self._store.posts.items()
            if post.subreddit_id == subreddit_id
        ]

    async def save(self, post: Post) -> Post:
        """Save a post."""
        if post.id is None:
            post = post.model_copy(update={"id": PostId(self._store.next_id("posts"))})
        self._store.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post with its comments."""
        self._store.cascade_delete_post(post_id)
