"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from specdit.domain.model.vote import Vote
from specdit.domain.repository.vote import VoteRepository
from specdit.domain.value import (
    Tally,
    UserId,
    VotableType,
    VoteId,
    VoteOutcome,
    VoteType,
)

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: int,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        for vote in self._store.votes.values():
            if (
                vote.user_id == user_id
                and vote.votable_type == votable_type
                and vote.votable_id == votable_id
            ):
                return vote
        return None

    async def find_by_user(
        self,
        user_id: UserId,
        votable_type: VotableType,
        vote_type: Optional[VoteType] = None,
    ) -> list[Vote]:
        """Find a user's votes on one kind of item, newest first."""
        votes = [
            v
            for v in self._store.votes.values()
            if v.user_id == user_id
            and v.votable_type == votable_type
            and (vote_type is None or v.vote_type == vote_type)
        ]
        votes.sort(key=lambda v: v.created_at, reverse=True)
        return votes

    async def insert(self, vote: Vote) -> Vote:
        """Insert a vote row.

        Raises:
            IntegrityError: If the user already voted on the item
        """
        if await self.find_by_user_and_votable(
            vote.user_id, vote.votable_type, vote.votable_id
        ):
            raise IntegrityError("Duplicate vote", None, Exception())

        saved = vote.model_copy(update={"id": VoteId(self._store.next_id("votes"))})
        self._store.votes[saved.id] = saved
        return saved

    async def toggle(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: int,
        vote_type: VoteType,
    ) -> VoteOutcome:
        """Apply a vote with toggle semantics."""
        existing = await self.find_by_user_and_votable(
            user_id, votable_type, votable_id
        )

        if existing is None:
            await self.insert(
                Vote(
                    user_id=user_id,
                    votable_type=votable_type,
                    votable_id=votable_id,
                    vote_type=vote_type,
                )
            )
            return VoteOutcome.RECORDED

        if existing.vote_type == vote_type:
            del self._store.votes[existing.id]
            return VoteOutcome.REMOVED

        self._store.votes[existing.id] = existing.model_copy(
            update={"vote_type": vote_type}
        )
        return VoteOutcome.SWITCHED

    async def tally(self, votable_type: VotableType, votable_id: int) -> Tally:
        """Count up and down votes on one item."""
        tallies = await self.tally_many(votable_type, [votable_id])
        return tallies[votable_id]

    async def tally_many(
        self, votable_type: VotableType, votable_ids: Sequence[int]
    ) -> dict[int, Tally]:
        """Count votes on many items."""
        counts = {votable_id: [0, 0] for votable_id in votable_ids}
        for vote in self._store.votes.values():
            if vote.votable_type != votable_type or vote.votable_id not in counts:
                continue
            if vote.vote_type == VoteType.UP:
                counts[vote.votable_id][0] += 1
            else:
                counts[vote.votable_id][1] += 1
        return {
            votable_id: Tally(upvotes=up, downvotes=down)
            for votable_id, (up, down) in counts.items()
        }

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[int]
    ) -> int:
        """Delete every vote on the given items."""
        wanted = set(votable_ids)
        doomed = [
            vote_id
            for vote_id, vote in self._store.votes.items()
            if vote.votable_type == votable_type and vote.votable_id in wanted
        ]
        for vote_id in doomed:
            del self._store.votes[vote_id]
        return len(doomed)
