"""Comment domain service."""

import logfire

from specdit.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from specdit.domain.model.comment import Comment
from specdit.domain.repository import CommentRepository
from specdit.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        text: str,
        reply_to_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The caller checks that the post exists.

        Args:
            post_id: Post ID
            author_id: Author user ID
            text: Comment text
            reply_to_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValidationError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author_id,
            reply_to_id=reply_to_id,
        ):
            if reply_to_id is not None:
                parent = await self.comment_repository.find_by_id(reply_to_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        reply_to_id=reply_to_id,
                        post_id=post_id,
                    )
                    raise NotFoundError("Comment", str(reply_to_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        reply_to_id=reply_to_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise ValidationError("Parent comment does not belong to this post")

            saved = await self.comment_repository.save(
                Comment(
                    post_id=post_id,
                    author_id=author_id,
                    text=text,
                    reply_to_id=reply_to_id,
                )
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                is_reply=reply_to_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post in fetch order.

        Args:
            post_id: Post ID

        Returns:
            Top-level comments newest first, replies oldest first
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def get_comments_by_ids(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, Comment]:
        """Batch fetch comments keyed by ID."""
        if not comment_ids:
            return {}
        comments = await self.comment_repository.find_by_ids(list(set(comment_ids)))
        return {comment.id: comment for comment in comments}

    async def get_comment_ids_for_posts(self, post_ids: list[PostId]) -> list[CommentId]:
        """IDs of every comment on the given posts."""
        if not post_ids:
            return []
        return await self.comment_repository.find_ids_by_posts(post_ids)

    async def get_owned_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Get a comment and check the user wrote it.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        comment = await self.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        if comment.author_id != user_id:
            logfire.warn(
                "Comment change by non-author", comment_id=comment_id, user_id=user_id
            )
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))
        return comment

    async def delete_comment(self, comment_id: CommentId) -> list[CommentId]:
        """Delete a comment and every reply below it.

        Ownership is checked with get_owned_comment() beforehand.

        Returns:
            IDs of all removed comments, the comment itself first
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            reply_ids = await self.comment_repository.find_reply_ids(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted", comment_id=comment_id, replies=len(reply_ids)
            )
            return [comment_id, *reply_ids]
