"""PostgreSQL implementation of Vote repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from specdit.domain.model import Vote
from specdit.domain.repository import VoteRepository
from specdit.domain.value import Tally, UserId, VotableType, VoteOutcome, VoteType
from specdit.persistence.mappers import row_to_vote
from specdit.persistence.tables import votes_table

_upvotes = func.count().filter(votes_table.c.vote_type == VoteType.UP.value)
_downvotes = func.count().filter(votes_table.c.vote_type == VoteType.DOWN.value)


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _votable_clause(
        self, user_id: UserId, votable_type: VotableType, votable_id: int
    ):
        return and_(
            votes_table.c.user_id == user_id,
            votes_table.c.votable_type == votable_type.value,
            votes_table.c.votable_id == votable_id,
        )

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: int,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            self._votable_clause(user_id, votable_type, votable_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user(
        self,
        user_id: UserId,
        votable_type: VotableType,
        vote_type: Optional[VoteType] = None,
    ) -> List[Vote]:
        """Find all votes a user cast on one kind of item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
            )
        )
        if vote_type is not None:
            stmt = stmt.where(votes_table.c.vote_type == vote_type.value)
        stmt = stmt.order_by(desc(votes_table.c.created_at))

        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def toggle(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: int,
        vote_type: VoteType,
    ) -> VoteOutcome:
        """Apply a vote with toggle semantics as one operation.

        The existing row is locked for the rest of the transaction. When
        there is no row, the insert runs in a savepoint so a concurrent
        insert by the same voter fails on unique_vote without poisoning the
        outer transaction.
        """
        clause = self._votable_clause(user_id, votable_type, votable_id)
        stmt = select(votes_table.c.id, votes_table.c.vote_type).where(clause)
        result = await self.session.execute(stmt.with_for_update())
        existing = result.fetchone()

        if existing is None:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(votes_table).values(
                        user_id=user_id,
                        votable_type=votable_type.value,
                        votable_id=votable_id,
                        vote_type=vote_type.value,
                    )
                )
            return VoteOutcome.RECORDED

        if existing.vote_type == vote_type.value:
            await self.session.execute(
                delete(votes_table).where(votes_table.c.id == existing.id)
            )
            await self.session.flush()
            return VoteOutcome.REMOVED

        await self.session.execute(
            update(votes_table)
            .where(votes_table.c.id == existing.id)
            .values(vote_type=vote_type.value)
        )
        await self.session.flush()
        return VoteOutcome.SWITCHED

    async def tally(self, votable_type: VotableType, votable_id: int) -> Tally:
        """Count up and down votes on one item in a single read."""
        stmt = select(
            _upvotes.label("upvotes"), _downvotes.label("downvotes")
        ).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.one()
        return Tally(upvotes=row.upvotes, downvotes=row.downvotes)

    async def tally_many(
        self, votable_type: VotableType, votable_ids: Sequence[int]
    ) -> Dict[int, Tally]:
        """Count votes on many items in a single read (batch query)."""
        tallies = {votable_id: Tally() for votable_id in votable_ids}
        if not votable_ids:
            return tallies

        stmt = (
            select(
                votes_table.c.votable_id,
                _upvotes.label("upvotes"),
                _downvotes.label("downvotes"),
            )
            .where(
                and_(
                    votes_table.c.votable_type == votable_type.value,
                    votes_table.c.votable_id.in_(votable_ids),
                )
            )
            .group_by(votes_table.c.votable_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            tallies[row.votable_id] = Tally(
                upvotes=row.upvotes, downvotes=row.downvotes
            )
        return tallies

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[int]
    ) -> int:
        """Delete every vote on the given items."""
        if not votable_ids:
            return 0
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
