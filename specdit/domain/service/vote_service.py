"""Vote domain service (the vote ledger).

A voter holds at most one vote per item. Casting a vote is a three-way
toggle decided by the repository in one operation:

- no vote yet: the vote is recorded
- same polarity again: the vote is removed
- opposite polarity: the vote is switched in place

Scores are never stored. They are tallied from the live vote rows whenever
a response needs them.
"""

from dataclasses import dataclass
from typing import Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from specdit.domain.error import ConflictError, NotFoundError
from specdit.domain.model import Comment, Post
from specdit.domain.repository import VoteRepository
from specdit.domain.value import (
    CommentId,
    PostId,
    Tally,
    UserId,
    VotableType,
    VoteOutcome,
    VoteType,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


@dataclass
class VotedItem:
    """An item a voter voted on, with the voter's polarity and the live tally."""

    target: Post | Comment
    vote_type: VoteType
    votes: Tally


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def cast_vote(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        votable_id: int,
        vote_type: VoteType,
    ) -> VoteOutcome:
        """Cast a vote with toggle semantics.

        Args:
            voter_id: Authenticated voter
            votable_type: Post or comment
            votable_id: ID of the item
            vote_type: Submitted polarity

        Returns:
            Which transition was applied

        Raises:
            NotFoundError: If the item doesn't exist
            ConflictError: If a concurrent vote by the same voter on the same
                item won the race; the request can be retried
        """
        with logfire.span(
            "vote_service.cast_vote",
            voter_id=voter_id,
            votable_type=votable_type.value,
            votable_id=votable_id,
            vote_type=vote_type.value,
        ):
            await self._ensure_votable_exists(votable_type, votable_id)

            try:
                outcome = await self.vote_repository.toggle(
                    user_id=voter_id,
                    votable_type=votable_type,
                    votable_id=votable_id,
                    vote_type=vote_type,
                )
            except IntegrityError:
                logfire.warn(
                    "Concurrent vote lost on unique constraint",
                    voter_id=voter_id,
                    votable_type=votable_type.value,
                    votable_id=votable_id,
                )
                raise ConflictError("Vote changed concurrently, retry the request")

            logfire.info(
                "Vote cast",
                voter_id=voter_id,
                votable_type=votable_type.value,
                votable_id=votable_id,
                outcome=outcome.value,
            )
            return outcome

    async def tally(self, votable_type: VotableType, votable_id: int) -> Tally:
        """Current up/down counts and score of one item.

        Args:
            votable_type: Post or comment
            votable_id: ID of the item

        Returns:
            Tally (all zero when nobody voted)
        """
        with logfire.span(
            "vote_service.tally",
            votable_type=votable_type.value,
            votable_id=votable_id,
        ):
            return await self.vote_repository.tally(votable_type, votable_id)

    async def tally_many(
        self, votable_type: VotableType, votable_ids: Sequence[int]
    ) -> dict[int, Tally]:
        """Tallies of several items of one kind.

        Args:
            votable_type: Post or comment
            votable_ids: IDs of the items

        Returns:
            Tally for every requested ID
        """
        if not votable_ids:
            return {}
        with logfire.span(
            "vote_service.tally_many",
            votable_type=votable_type.value,
            count=len(votable_ids),
        ):
            return await self.vote_repository.tally_many(
                votable_type, list(dict.fromkeys(votable_ids))
            )

    async def votes_by_voter(
        self,
        voter_id: UserId,
        votable_type: VotableType,
        vote_type: VoteType | None = None,
    ) -> list[VotedItem]:
        """Every item of one kind a voter voted on, with live tallies.

        Args:
            voter_id: The voter
            votable_type: Post or comment
            vote_type: Only include this polarity (None for both)

        Returns:
            Voted items, most recently created item first
        """
        with logfire.span(
            "vote_service.votes_by_voter",
            voter_id=voter_id,
            votable_type=votable_type.value,
            vote_type=vote_type.value if vote_type else None,
        ):
            votes = await self.vote_repository.find_by_user(
                voter_id, votable_type, vote_type
            )
            if not votes:
                return []

            ids = [vote.votable_id for vote in votes]
            if votable_type is VotableType.POST:
                targets: dict = await self.post_service.get_posts_by_ids(
                    [PostId(i) for i in ids]
                )
            else:
                targets = await self.comment_service.get_comments_by_ids(
                    [CommentId(i) for i in ids]
                )
            tallies = await self.tally_many(votable_type, ids)

            items = [
                VotedItem(
                    target=targets[vote.votable_id],
                    vote_type=vote.vote_type,
                    votes=tallies.get(vote.votable_id, Tally()),
                )
                for vote in votes
                if vote.votable_id in targets
            ]
            items.sort(key=lambda item: item.target.created_at, reverse=True)

            logfire.info(
                "Votes by voter retrieved", voter_id=voter_id, count=len(items)
            )
            return items

    async def purge_votes(
        self, votable_type: VotableType, votable_ids: Sequence[int]
    ) -> int:
        """Delete every vote on the given items.

        Returns:
            Number of votes deleted
        """
        if not votable_ids:
            return 0
        with logfire.span(
            "vote_service.purge_votes",
            votable_type=votable_type.value,
            count=len(votable_ids),
        ):
            deleted = await self.vote_repository.delete_by_votables(
                votable_type, list(votable_ids)
            )
            logfire.info(
                "Votes purged", votable_type=votable_type.value, deleted=deleted
            )
            return deleted

    async def purge_votes_for_posts(self, post_ids: Sequence[PostId]) -> int:
        """Delete every vote on the given posts and on their comments.

        Returns:
            Number of votes deleted
        """
        comment_ids = await self.comment_service.get_comment_ids_for_posts(
            list(post_ids)
        )
        deleted = await self.purge_votes(VotableType.COMMENT, comment_ids)
        deleted += await self.purge_votes(VotableType.POST, post_ids)
        return deleted

    async def _ensure_votable_exists(
        self, votable_type: VotableType, votable_id: int
    ) -> None:
        if votable_type is VotableType.POST:
            target = await self.post_service.get_post_by_id(PostId(votable_id))
            resource = "Post"
        else:
            target = await self.comment_service.get_comment_by_id(
                CommentId(votable_id)
            )
            resource = "Comment"

        if not target:
            logfire.warn(
                "Vote on non-existent item",
                votable_type=votable_type.value,
                votable_id=votable_id,
            )
            raise NotFoundError(resource, str(votable_id))
