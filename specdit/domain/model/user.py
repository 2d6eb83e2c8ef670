"""User aggregate root.

Users register with email and password credentials.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from specdit.domain.model.common import DomainModel
from specdit.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    The id is assigned by the repository on first save.
    The username is generated at registration and is what other users see.
    """

    id: Optional[UserId] = None
    email: str = Field(min_length=3, max_length=255)
    username: str = Field(min_length=1, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)
    hashed_password: str
    email_verified: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
