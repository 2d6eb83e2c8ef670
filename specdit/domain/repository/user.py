"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from specdit.domain.model.user import User
from specdit.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address.

        Args:
            email: The email used at registration

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's public username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        New users (id is None) get an id assigned.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the email is already registered
        """
        pass

    @abstractmethod
    async def update_password(
        self, user_id: UserId, hashed_password: str
    ) -> Optional[User]:
        """Replace a user's password hash.

        Args:
            user_id: The user's ID
            hashed_password: New bcrypt hash

        Returns:
            The updated user, or None if the user doesn't exist
        """
        pass
