"""Unit tests for post use cases."""

import pytest

from specdit.application.usecase.post import (
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
    ListVotedPostsRequest,
    ListVotedPostsUseCase,
)
from specdit.application.usecase.subreddit import (
    DeleteSubredditRequest,
    DeleteSubredditUseCase,
)
from specdit.domain.error import NotAuthorizedError, NotFoundError
from specdit.domain.repository import VoteRepository
from specdit.domain.service import VoteService
from specdit.domain.value import Tally, VotableType, VoteType
from tests.harness import create_env_fixture
from tests.unit.seed import seed_comment, seed_thread, seed_user

unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_returns_post_with_tally_and_ranked_comments(self, unit_env):
        """The post comes with its score and a score-ranked comment tree."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        vote_service = await unit_env.get(VoteService)
        user, subreddit, post = await seed_thread(unit_env)
        voter = await seed_user(unit_env, "voter@example.com")
        quiet = await seed_comment(unit_env, post.id, user.id, text="quiet")
        loud = await seed_comment(unit_env, post.id, user.id, text="loud")
        reply = await seed_comment(
            unit_env, post.id, voter.id, text="reply", reply_to_id=quiet.id
        )
        await vote_service.cast_vote(voter.id, VotableType.POST, post.id, VoteType.UP)
        await vote_service.cast_vote(
            voter.id, VotableType.COMMENT, quiet.id, VoteType.UP
        )
        await vote_service.cast_vote(
            user.id, VotableType.COMMENT, quiet.id, VoteType.UP
        )
        await vote_service.cast_vote(
            voter.id, VotableType.COMMENT, loud.id, VoteType.UP
        )

        # Act
        result = await use_case.execute(GetPostRequest(post_id=post.id))

        # Assert
        assert result.id == post.id
        assert result.votes == Tally(upvotes=1, downvotes=0)
        assert result.author.username == user.username
        assert result.subreddit.name == subreddit.name
        assert [c.id for c in result.comments] == [quiet.id, loud.id]
        assert result.comments[0].votes.score == 2
        assert [r.id for r in result.comments[0].replies] == [reply.id]
        assert result.comments[0].replies[0].author.username == voter.username

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """An unknown post raises NotFoundError."""
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=404))


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_delete_purges_votes_on_post_and_comments(self, unit_env):
        """No vote rows survive the post they point at."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user, _, post = await seed_thread(unit_env)
        comment = await seed_comment(unit_env, post.id, user.id)
        await vote_service.cast_vote(user.id, VotableType.POST, post.id, VoteType.UP)
        await vote_service.cast_vote(
            user.id, VotableType.COMMENT, comment.id, VoteType.DOWN
        )

        # Act
        await use_case.execute(DeletePostRequest(post_id=post.id, user_id=user.id))

        # Assert
        assert await vote_repo.find_by_user(user.id, VotableType.POST) == []
        assert await vote_repo.find_by_user(user.id, VotableType.COMMENT) == []

    @pytest.mark.asyncio
    async def test_delete_by_non_author(self, unit_env):
        """Only the author can delete a post."""
        use_case = await unit_env.get(DeletePostUseCase)
        _, _, post = await seed_thread(unit_env)
        other = await seed_user(unit_env, "mallory@example.com")

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(DeletePostRequest(post_id=post.id, user_id=other.id))


class TestDeleteSubredditUseCase:
    """Tests for DeleteSubredditUseCase."""

    @pytest.mark.asyncio
    async def test_delete_purges_votes(self, unit_env):
        """Deleting a subreddit purges votes on its posts."""
        use_case = await unit_env.get(DeleteSubredditUseCase)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user, subreddit, post = await seed_thread(unit_env)
        await vote_service.cast_vote(user.id, VotableType.POST, post.id, VoteType.UP)

        await use_case.execute(
            DeleteSubredditRequest(subreddit_id=subreddit.id, user_id=user.id)
        )

        assert await vote_repo.find_by_user(user.id, VotableType.POST) == []


class TestListUserPostsUseCase:
    """Tests for ListUserPostsUseCase."""

    @pytest.mark.asyncio
    async def test_list_by_username(self, unit_env):
        """Posts are listed with tallies, author and pagination."""
        use_case = await unit_env.get(ListUserPostsUseCase)
        user, subreddit, post = await seed_thread(unit_env)

        result = await use_case.execute(
            ListUserPostsRequest(username=user.username, page=1, limit=10)
        )

        assert [p.id for p in result.posts] == [post.id]
        assert result.posts[0].votes == Tally()
        assert result.posts[0].subreddit.name == subreddit.name
        assert result.pagination.total_posts == 1

    @pytest.mark.asyncio
    async def test_unknown_username(self, unit_env):
        """An unknown username raises NotFoundError."""
        use_case = await unit_env.get(ListUserPostsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListUserPostsRequest(username="ghost"))

    def test_requires_exactly_one_author_selector(self):
        """Both or neither of user_id and username is invalid."""
        with pytest.raises(ValueError):
            ListUserPostsRequest()
        with pytest.raises(ValueError):
            ListUserPostsRequest(user_id=1, username="alice")


class TestListVotedPostsUseCase:
    """Tests for ListVotedPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_user_vote_type(self, unit_env):
        """Each voted post carries the caller's polarity."""
        use_case = await unit_env.get(ListVotedPostsUseCase)
        vote_service = await unit_env.get(VoteService)
        user, _, post = await seed_thread(unit_env)
        await vote_service.cast_vote(user.id, VotableType.POST, post.id, VoteType.DOWN)

        result = await use_case.execute(ListVotedPostsRequest(user_id=user.id))

        assert [p.id for p in result.posts] == [post.id]
        assert result.posts[0].user_vote_type is VoteType.DOWN
        assert result.posts[0].votes.score == -1
