"""Subreddit domain service."""

from datetime import datetime

import logfire
from sqlalchemy.exc import IntegrityError

from specdit.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from specdit.domain.model import Subreddit
from specdit.domain.repository import SubredditRepository
from specdit.domain.value import SubredditId, UserId

from .base import Service


class SubredditService(Service):
    """Domain service for subreddit operations."""

    def __init__(self, subreddit_repository: SubredditRepository) -> None:
        """Initialize subreddit service.

        Args:
            subreddit_repository: Subreddit repository
        """
        self.subreddit_repository = subreddit_repository

    async def create_subreddit(self, name: str, creator_id: UserId) -> Subreddit:
        """Create a subreddit.

        Raises:
            ConflictError: If the name is taken
        """
        with logfire.span(
            "subreddit_service.create_subreddit", name=name, creator_id=creator_id
        ):
            try:
                saved = await self.subreddit_repository.save(
                    Subreddit(name=name, creator_id=creator_id)
                )
            except IntegrityError:
                logfire.warn("Subreddit name taken", name=name)
                raise ConflictError(f"Subreddit '{name}' already exists")
            logfire.info("Subreddit created", subreddit_id=saved.id, name=name)
            return saved

    async def get_subreddit(self, subreddit_id: SubredditId) -> Subreddit:
        """Get a subreddit by ID.

        Raises:
            NotFoundError: If the subreddit doesn't exist
        """
        with logfire.span(
            "subreddit_service.get_subreddit", subreddit_id=subreddit_id
        ):
            subreddit = await self.subreddit_repository.find_by_id(subreddit_id)
            if not subreddit:
                logfire.warn("Subreddit not found", subreddit_id=subreddit_id)
                raise NotFoundError("Subreddit", str(subreddit_id))
            return subreddit

    async def list_subreddits(self) -> list[Subreddit]:
        """List every subreddit."""
        with logfire.span("subreddit_service.list_subreddits"):
            subreddits = await self.subreddit_repository.find_all()
            logfire.info("Subreddits listed", count=len(subreddits))
            return subreddits

    async def get_subreddits_by_ids(
        self, subreddit_ids: list[SubredditId]
    ) -> dict[SubredditId, Subreddit]:
        """Batch fetch subreddits keyed by ID."""
        if not subreddit_ids:
            return {}
        subreddits = await self.subreddit_repository.find_by_ids(
            list(set(subreddit_ids))
        )
        return {subreddit.id: subreddit for subreddit in subreddits}

    async def rename_subreddit(
        self, subreddit_id: SubredditId, name: str, user_id: UserId
    ) -> Subreddit:
        """Rename a subreddit.

        Raises:
            NotFoundError: If the subreddit doesn't exist
            NotAuthorizedError: If the user isn't the creator
            ConflictError: If the new name is taken
        """
        with logfire.span(
            "subreddit_service.rename_subreddit",
            subreddit_id=subreddit_id,
            user_id=user_id,
        ):
            subreddit = await self.get_owned_subreddit(subreddit_id, user_id)
            try:
                saved = await self.subreddit_repository.save(
                    subreddit.model_copy(
                        update={"name": name, "updated_at": datetime.now()}
                    )
                )
            except IntegrityError:
                logfire.warn("Subreddit name taken", name=name)
                raise ConflictError(f"Subreddit '{name}' already exists")
            logfire.info("Subreddit renamed", subreddit_id=subreddit_id, name=name)
            return saved

    async def delete_subreddit(
        self, subreddit_id: SubredditId, user_id: UserId
    ) -> None:
        """Delete a subreddit with its posts and subscriptions.

        Votes on its content are not touched here.
        """
        with logfire.span(
            "subreddit_service.delete_subreddit",
            subreddit_id=subreddit_id,
            user_id=user_id,
        ):
            await self.get_owned_subreddit(subreddit_id, user_id)
            await self.subreddit_repository.delete(subreddit_id)
            logfire.info("Subreddit deleted", subreddit_id=subreddit_id)

    async def get_owned_subreddit(
        self, subreddit_id: SubredditId, user_id: UserId
    ) -> Subreddit:
        """Get a subreddit and check the user created it.

        Raises:
            NotFoundError: If the subreddit doesn't exist
            NotAuthorizedError: If the user isn't the creator
        """
        subreddit = await self.get_subreddit(subreddit_id)
        if subreddit.creator_id != user_id:
            logfire.warn(
                "Subreddit change by non-creator",
                subreddit_id=subreddit_id,
                user_id=user_id,
            )
            raise NotAuthorizedError("subreddit", str(subreddit_id), str(user_id))
        return subreddit
