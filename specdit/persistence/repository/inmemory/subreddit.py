"""In-memory subreddit repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from specdit.domain.model.subreddit import Subreddit
from specdit.domain.repository.subreddit import SubredditRepository
from specdit.domain.value import SubredditId

from .store import InMemoryStore


class InMemorySubredditRepository(SubredditRepository):
    """In-memory implementation of SubredditRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID."""
        return self._store.subreddits.get(subreddit_id)

    async def find_by_ids(
        self, subreddit_ids: Sequence[SubredditId]
    ) -> list[Subreddit]:
        """Find several subreddits at once."""
        return [
            self._store.subreddits[subreddit_id]
            for subreddit_id in subreddit_ids
            if subreddit_id in self._store.subreddits
        ]

    async def find_all(self) -> list[Subreddit]:
        """Find every subreddit, oldest first."""
        return sorted(
            self._store.subreddits.values(), key=lambda s: (s.created_at, s.id)
        )

    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save a subreddit.

        Raises:
            IntegrityError: If the name is taken by another subreddit
        """
        for other in self._store.subreddits.values():
            if other.id != subreddit.id and other.name == subreddit.name:
                raise IntegrityError("Duplicate subreddit name", None, Exception())

        if subreddit.id is None:
            subreddit = subreddit.model_copy(
                update={"id": SubredditId(self._store.next_id("subreddits"))}
            )
        self._store.subreddits[subreddit.id] = subreddit
        return subreddit

    async def delete(self, subreddit_id: SubredditId) -> None:
        """Delete a subreddit with its posts and subscriptions."""
        self._store.cascade_delete_subreddit(subreddit_id)
