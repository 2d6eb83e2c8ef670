"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from specdit.domain.model.user import User
from specdit.domain.repository.user import UserRepository
from specdit.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [
            self._store.users[user_id]
            for user_id in user_ids
            if user_id in self._store.users
        ]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If the email or username is taken by another user
        """
        for other in self._store.users.values():
            if other.id != user.id and (
                other.email == user.email or other.username == user.username
            ):
                raise IntegrityError("Duplicate user", None, Exception())

        if user.id is None:
            user = user.model_copy(update={"id": UserId(self._store.next_id("users"))})
        self._store.users[user.id] = user
        return user

    async def update_password(
        self, user_id: UserId, hashed_password: str
    ) -> Optional[User]:
        """Replace a user's password hash."""
        user = self._store.users.get(user_id)
        if not user:
            return None
        updated = user.model_copy(update={"hashed_password": hashed_password})
        self._store.users[user_id] = updated
        return updated
