"""Unit tests for VoteService."""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from specdit.domain.error import ConflictError, NotFoundError
from specdit.domain.repository import VoteRepository
from specdit.domain.service import VoteService
from specdit.domain.value import Tally, UserId, VotableType, VoteOutcome, VoteType
from tests.harness import create_env_fixture
from tests.unit.seed import (
    seed_comment,
    seed_post,
    seed_subreddit,
    seed_thread,
    seed_user,
)

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCastVote:
    """Tests for cast_vote toggle semantics."""

    @pytest.mark.asyncio
    async def test_first_vote_is_recorded(self, unit_env):
        """A first vote should create a row."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user, _, post = await seed_thread(unit_env)

        # Act
        outcome = await vote_service.cast_vote(
            user.id, VotableType.POST, post.id, VoteType.UP
        )

        # Assert
        assert outcome is VoteOutcome.RECORDED
        vote = await vote_repo.find_by_user_and_votable(
            user.id, VotableType.POST, post.id
        )
        assert vote is not None
        assert vote.vote_type is VoteType.UP

    @pytest.mark.asyncio
    async def test_same_polarity_twice_removes_vote(self, unit_env):
        """UP then UP should restore the tally from before the first vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user, _, post = await seed_thread(unit_env)
        before = await vote_service.tally(VotableType.POST, post.id)

        # Act
        await vote_service.cast_vote(user.id, VotableType.POST, post.id, VoteType.UP)
        outcome = await vote_service.cast_vote(
            user.id, VotableType.POST, post.id, VoteType.UP
        )

        # Assert
        assert outcome is VoteOutcome.REMOVED
        assert await vote_service.tally(VotableType.POST, post.id) == before
        assert (
            await vote_repo.find_by_user_and_votable(
                user.id, VotableType.POST, post.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_opposite_polarity_switches_in_place(self, unit_env):
        """UP then DOWN should flip the vote and keep exactly one row."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user, _, post = await seed_thread(unit_env)

        # Act
        await vote_service.cast_vote(user.id, VotableType.POST, post.id, VoteType.UP)
        outcome = await vote_service.cast_vote(
            user.id, VotableType.POST, post.id, VoteType.DOWN
        )

        # Assert
        assert outcome is VoteOutcome.SWITCHED
        votes = await vote_repo.find_by_user(user.id, VotableType.POST)
        assert len(votes) == 1
        assert votes[0].vote_type is VoteType.DOWN
        assert await vote_service.tally(VotableType.POST, post.id) == Tally(
            upvotes=0, downvotes=1
        )

    @pytest.mark.asyncio
    async def test_vote_on_comment(self, unit_env):
        """Comments are voted on through the same ledger."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user, _, post = await seed_thread(unit_env)
        comment = await seed_comment(unit_env, post.id, user.id)

        # Act
        outcome = await vote_service.cast_vote(
            user.id, VotableType.COMMENT, comment.id, VoteType.DOWN
        )

        # Assert
        assert outcome is VoteOutcome.RECORDED
        tally = await vote_service.tally(VotableType.COMMENT, comment.id)
        assert tally.score == -1
        # Same numeric id, different kind of target
        assert await vote_service.tally(VotableType.POST, comment.id) == Tally()

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_raises(self, unit_env):
        """Voting on a post that doesn't exist should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)
        user = await seed_user(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.cast_vote(user.id, VotableType.POST, 999, VoteType.UP)

        assert exc_info.value.resource == "Post"

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_raises(self, unit_env):
        """Voting on a comment that doesn't exist should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)
        user = await seed_user(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.cast_vote(
                user.id, VotableType.COMMENT, 999, VoteType.UP
            )

        assert exc_info.value.resource == "Comment"

    @pytest.mark.asyncio
    async def test_lost_race_raises_conflict(self, unit_env, monkeypatch):
        """A unique-constraint violation from a concurrent vote becomes a conflict."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user, _, post = await seed_thread(unit_env)

        async def racing_toggle(**kwargs):
            raise IntegrityError("Duplicate vote", None, Exception())

        monkeypatch.setattr(vote_service.vote_repository, "toggle", racing_toggle)

        # Act & Assert
        with pytest.raises(ConflictError):
            await vote_service.cast_vote(
                user.id, VotableType.POST, post.id, VoteType.UP
            )


class TestTally:
    """Tests for tally and tally_many."""

    @pytest.mark.asyncio
    async def test_tally_counts_both_polarities(self, unit_env):
        """Votes {UP, UP, DOWN} should tally to 2 up, 1 down, score 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        author, _, post = await seed_thread(unit_env)
        voters = [
            await seed_user(unit_env, f"voter{i}@example.com") for i in range(3)
        ]

        # Act
        for voter, vote_type in zip(voters, [VoteType.UP, VoteType.UP, VoteType.DOWN]):
            await vote_service.cast_vote(voter.id, VotableType.POST, post.id, vote_type)
        tally = await vote_service.tally(VotableType.POST, post.id)

        # Assert
        assert tally == Tally(upvotes=2, downvotes=1)
        assert tally.score == 1

    @pytest.mark.asyncio
    async def test_tally_without_votes_is_zero(self, unit_env):
        """A target nobody voted on has an all-zero tally."""
        vote_service = await unit_env.get(VoteService)
        _, _, post = await seed_thread(unit_env)

        tally = await vote_service.tally(VotableType.POST, post.id)

        assert (tally.upvotes, tally.downvotes, tally.score) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_tally_many_covers_every_id(self, unit_env):
        """Every requested id gets a tally, voted or not."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user, subreddit, first = await seed_thread(unit_env)
        second = await seed_post(unit_env, user.id, subreddit.id, title="Second")
        await vote_service.cast_vote(user.id, VotableType.POST, first.id, VoteType.UP)

        # Act
        tallies = await vote_service.tally_many(
            VotableType.POST, [first.id, second.id, first.id]
        )

        # Assert
        assert tallies == {
            first.id: Tally(upvotes=1, downvotes=0),
            second.id: Tally(),
        }

    @pytest.mark.asyncio
    async def test_tally_many_empty(self, unit_env):
        """No ids means no tallies."""
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.tally_many(VotableType.POST, []) == {}


class TestVotesByVoter:
    """Tests for votes_by_voter."""

    @pytest.mark.asyncio
    async def test_lists_voted_items_newest_target_first(self, unit_env):
        """Voted items are ordered by the target's creation time, descending."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user = await seed_user(unit_env)
        subreddit = await seed_subreddit(unit_env, user.id)
        older = await seed_post(
            unit_env, user.id, subreddit.id, "Older", created_at=datetime(2026, 1, 1)
        )
        newer = await seed_post(
            unit_env, user.id, subreddit.id, "Newer", created_at=datetime(2026, 1, 2)
        )
        # Vote on the newer post first so vote order differs from target order
        await vote_service.cast_vote(user.id, VotableType.POST, newer.id, VoteType.DOWN)
        await vote_service.cast_vote(user.id, VotableType.POST, older.id, VoteType.UP)

        # Act
        items = await vote_service.votes_by_voter(user.id, VotableType.POST)

        # Assert
        assert [item.target.id for item in items] == [newer.id, older.id]
        assert [item.vote_type for item in items] == [VoteType.DOWN, VoteType.UP]
        assert items[0].votes == Tally(upvotes=0, downvotes=1)

    @pytest.mark.asyncio
    async def test_filters_by_polarity(self, unit_env):
        """Passing a vote type keeps only votes of that polarity."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user, subreddit, first = await seed_thread(unit_env)
        second = await seed_post(unit_env, user.id, subreddit.id, title="Second")
        await vote_service.cast_vote(user.id, VotableType.POST, first.id, VoteType.UP)
        await vote_service.cast_vote(user.id, VotableType.POST, second.id, VoteType.DOWN)

        # Act
        items = await vote_service.votes_by_voter(
            user.id, VotableType.POST, VoteType.UP
        )

        # Assert
        assert [item.target.id for item in items] == [first.id]

    @pytest.mark.asyncio
    async def test_no_votes(self, unit_env):
        """A voter without votes gets an empty list."""
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.votes_by_voter(UserId(1), VotableType.COMMENT) == []


class TestPurgeVotes:
    """Tests for vote purging on deletes."""

    @pytest.mark.asyncio
    async def test_purge_votes_for_posts_removes_comment_votes(self, unit_env):
        """Purging a post removes votes on it and on its comments."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user, _, post = await seed_thread(unit_env)
        comment = await seed_comment(unit_env, post.id, user.id)
        await vote_service.cast_vote(user.id, VotableType.POST, post.id, VoteType.UP)
        await vote_service.cast_vote(
            user.id, VotableType.COMMENT, comment.id, VoteType.UP
        )

        # Act
        deleted = await vote_service.purge_votes_for_posts([post.id])

        # Assert
        assert deleted == 2
        assert await vote_service.tally(VotableType.POST, post.id) == Tally()
        assert await vote_service.tally(VotableType.COMMENT, comment.id) == Tally()
