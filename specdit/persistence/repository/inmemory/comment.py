"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from specdit.domain.model.comment import Comment
from specdit.domain.repository.comment import CommentRepository
from specdit.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments at once."""
        return [
            self._store.comments[comment_id]
            for comment_id in comment_ids
            if comment_id in self._store.comments
        ]

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Top-level comments newest first, then replies oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))

        top_level = [c for c in reversed(comments) if c.reply_to_id is None]
        replies = [c for c in comments if c.reply_to_id is not None]
        return top_level + replies

    async def find_ids_by_posts(self, post_ids: Sequence[PostId]) -> list[CommentId]:
        """Find the IDs of every comment on the given posts."""
        wanted = set(post_ids)
        return [
            comment_id
            for comment_id, comment in self._store.comments.items()
            if comment.post_id in wanted
        ]

    async def find_reply_ids(self, comment_id: CommentId) -> list[CommentId]:
        """Find the IDs of every reply below a comment, at any depth."""
        found: list[CommentId] = []
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for reply_id, reply in self._store.comments.items():
                if reply.reply_to_id == parent_id:
                    found.append(reply_id)
                    frontier.append(reply_id)
        return found

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        if comment.id is None:
            comment = comment.model_copy(
                update={"id": CommentId(self._store.next_id("comments"))}
            )
        self._store.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment with its replies."""
        self._store.cascade_delete_comment(comment_id)
