"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from specdit.domain.model.vote import Vote
from specdit.domain.value import Tally, UserId, VotableType, VoteOutcome, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer and must enforce the
    (user_id, votable_type, votable_id) uniqueness constraint themselves.
    """

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: int,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (post or comment)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self,
        user_id: UserId,
        votable_type: VotableType,
        vote_type: Optional[VoteType] = None,
    ) -> List[Vote]:
        """Find all votes a user cast on one kind of item.

        Args:
            user_id: The user's ID
            votable_type: Type of items (post or comment)
            vote_type: Only return votes of this polarity (None for both)

        Returns:
            List of votes by the user
        """
        pass

    @abstractmethod
    async def toggle(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: int,
        vote_type: VoteType,
    ) -> VoteOutcome:
        """Apply a vote with toggle semantics as one operation.

        - No existing vote: insert it (RECORDED)
        - Existing vote with the same polarity: delete it (REMOVED)
        - Existing vote with the opposite polarity: flip it (SWITCHED)

        Args:
            user_id: The voter's ID
            votable_type: Type of item (post or comment)
            votable_id: ID of the item
            vote_type: Submitted polarity

        Returns:
            The transition that was applied

        Raises:
            IntegrityError: If a concurrent request from the same voter
                inserted a vote on the same item first
        """
        pass

    @abstractmethod
    async def tally(self, votable_type: VotableType, votable_id: int) -> Tally:
        """Count up and down votes on one item in a single read.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item

        Returns:
            Vote counts (zero counts when the item has no votes)
        """
        pass

    @abstractmethod
    async def tally_many(
        self, votable_type: VotableType, votable_ids: Sequence[int]
    ) -> Dict[int, Tally]:
        """Count votes on many items in a single read (batch query).

        Args:
            votable_type: Type of items (post or comment)
            votable_ids: IDs of the items

        Returns:
            Mapping of every requested ID to its tally
        """
        pass

    @abstractmethod
    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[int]
    ) -> int:
        """Delete every vote on the given items.

        Used when posts or comments are deleted.

        Returns:
            Number of votes deleted
        """
        pass
