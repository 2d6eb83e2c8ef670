"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from specdit.domain.model.comment import Comment
from specdit.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once (batch query)."""
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in fetch order.

        Top-level comments come newest first, replies oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments (both levels, flat)
        """
        pass

    @abstractmethod
    async def find_ids_by_posts(self, post_ids: Sequence[PostId]) -> List[CommentId]:
        """Find the IDs of every comment on the given posts."""
        pass

    @abstractmethod
    async def find_reply_ids(self, comment_id: CommentId) -> List[CommentId]:
        """Find the IDs of every reply below a comment, at any depth."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        New comments (id is None) get an id assigned.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and its replies (hard delete).

        Args:
            comment_id: The comment ID to delete
        """
        pass
