"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from specdit.domain.model.post import Post
from specdit.domain.value import PostId, SubredditId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts at once (batch query).

        Args:
            post_ids: IDs to look up

        Returns:
            Posts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts by a specific author.

        Args:
            author_id: The author's user ID

        Returns:
            Total number of posts by the author
        """
        pass

    @abstractmethod
    async def find_ids_by_subreddit(self, subreddit_id: SubredditId) -> List[PostId]:
        """Find the IDs of every post in a subreddit."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        New posts (id is None) get an id assigned.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its comments (hard delete).

        Args:
            post_id: The post ID to delete
        """
        pass
