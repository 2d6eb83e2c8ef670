"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from specdit.domain.model import User
from specdit.domain.repository import UserRepository
from specdit.domain.value import UserId
from specdit.persistence.mappers import row_to_user, user_to_dict
from specdit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query)."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)

        if user.id is None:
            stmt = insert(users_table).values(**user_dict).returning(users_table.c.id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return user.model_copy(update={"id": UserId(result.scalar_one())})

        stmt = (
            update(users_table).where(users_table.c.id == user.id).values(**user_dict)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def update_password(
        self, user_id: UserId, hashed_password: str
    ) -> Optional[User]:
        """Replace a user's password hash."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(hashed_password=hashed_password, updated_at=datetime.now())
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_user(row._asdict()) if row else None
