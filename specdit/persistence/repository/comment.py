"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from specdit.domain.model import Comment
from specdit.domain.repository import CommentRepository
from specdit.domain.value import CommentId, PostId
from specdit.persistence.mappers import comment_to_dict, row_to_comment
from specdit.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once (batch query)."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in fetch order.

        Top-level comments come newest first, replies oldest first.
        """
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        comments = [row_to_comment(row._asdict()) for row in result.fetchall()]

        top_level = [c for c in reversed(comments) if c.reply_to_id is None]
        replies = [c for c in comments if c.reply_to_id is not None]
        return top_level + replies

    async def find_ids_by_posts(self, post_ids: Sequence[PostId]) -> List[CommentId]:
        """Find the IDs of every comment on the given posts."""
        if not post_ids:
            return []
        stmt = select(comments_table.c.id).where(comments_table.c.post_id.in_(post_ids))
        result = await self.session.execute(stmt)
        return [CommentId(comment_id) for comment_id in result.scalars().all()]

    async def find_reply_ids(self, comment_id: CommentId) -> List[CommentId]:
        """Find the IDs of every reply below a comment, at any depth."""
        tree = (
            select(comments_table.c.id)
            .where(comments_table.c.reply_to_id == comment_id)
            .cte(name="reply_tree", recursive=True)
        )
        tree = tree.union_all(
            select(comments_table.c.id).where(comments_table.c.reply_to_id == tree.c.id)
        )
        result = await self.session.execute(select(tree.c.id))
        return [CommentId(reply_id) for reply_id in result.scalars().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)

        if comment.id is None:
            stmt = (
                insert(comments_table)
                .values(**comment_dict)
                .returning(comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return comment.model_copy(update={"id": CommentId(result.scalar_one())})

        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .values(**comment_dict)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; replies follow by ON DELETE CASCADE."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
