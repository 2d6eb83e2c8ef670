"""PostgreSQL implementation of Post repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from specdit.domain.model import Post
from specdit.domain.repository import PostRepository
from specdit.domain.value import PostId, SubredditId, UserId
from specdit.persistence.mappers import post_to_dict, row_to_post
from specdit.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts at once (batch query)."""
        if not post_ids:
            return []
        stmt = select(posts_table).where(posts_table.c.id.in_(post_ids))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts by a specific author."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_ids_by_subreddit(self, subreddit_id: SubredditId) -> List[PostId]:
        """Find the IDs of every post in a subreddit."""
        stmt = select(posts_table.c.id).where(
            posts_table.c.subreddit_id == subreddit_id
        )
        result = await self.session.execute(stmt)
        return [PostId(post_id) for post_id in result.scalars().all()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)

        if post.id is None:
            stmt = insert(posts_table).values(**post_dict).returning(posts_table.c.id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return post.model_copy(update={"id": PostId(result.scalar_one())})

        stmt = (
            update(posts_table).where(posts_table.c.id == post.id).values(**post_dict)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post; comments follow by ON DELETE CASCADE."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()
