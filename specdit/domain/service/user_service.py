"""User domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from specdit.config import AuthSettings
from specdit.domain.error import AuthenticationError, ConflictError, NotFoundError
from specdit.domain.model import User
from specdit.domain.repository import UserRepository
from specdit.domain.value import UserId
from specdit.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, email: str, password: str, name: str | None) -> User:
        """Register a new user.

        The username is generated, users pick a display name instead.

        Args:
            email: Email address (unique)
            password: Plain text password
            name: Optional display name

        Returns:
            Created user

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("user_service.register"):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Registration with existing email")
                raise ConflictError("User already exists")

            user = User(
                email=email,
                username=str(uuid4()),
                name=name,
                hashed_password=hash_password(
                    password, self.auth_settings.bcrypt_rounds
                ),
            )
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Concurrent registration with same email")
                raise ConflictError("User already exists")

            logfire.info("User registered", user_id=saved.id)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check email and password credentials.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            The matching user

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.hashed_password):
                logfire.warn("Invalid login attempt")
                raise AuthenticationError("Invalid credentials")
            logfire.info("User authenticated", user_id=user.id)
            return user

    async def change_password(
        self, user_id: UserId, old_password: str, new_password: str
    ) -> None:
        """Replace a user's password after checking the current one.

        Raises:
            NotFoundError: If the user doesn't exist
            AuthenticationError: If the old password is wrong
        """
        with logfire.span("user_service.change_password", user_id=user_id):
            user = await self.get_by_id(user_id)
            if not verify_password(old_password, user.hashed_password):
                logfire.warn("Password change with wrong password", user_id=user_id)
                raise AuthenticationError("Invalid old password")

            await self.user_repository.update_password(
                user_id,
                hash_password(new_password, self.auth_settings.bcrypt_rounds),
            )
            logfire.info("Password changed", user_id=user_id)

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None."""
        return await self.user_repository.find_by_id(user_id)

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch fetch users keyed by ID."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}
