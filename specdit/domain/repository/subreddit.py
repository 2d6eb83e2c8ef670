"""Subreddit repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from specdit.domain.model.subreddit import Subreddit
from specdit.domain.value import SubredditId


class SubredditRepository(ABC):
    """Repository for Subreddit entity."""

    @abstractmethod
    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID."""
        pass

    @abstractmethod
    async def find_by_ids(
        self, subreddit_ids: Sequence[SubredditId]
    ) -> List[Subreddit]:
        """Find several subreddits at once (batch query)."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Subreddit]:
        """Find every subreddit, oldest first."""
        pass

    @abstractmethod
    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save a subreddit (create or update).

        Raises:
            IntegrityError: If the name is already taken
        """
        pass

    @abstractmethod
    async def delete(self, subreddit_id: SubredditId) -> None:
        """Delete a subreddit together with its posts and subscriptions."""
        pass
