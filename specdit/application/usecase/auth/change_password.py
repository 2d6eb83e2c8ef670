"""Change password use case."""

from pydantic import BaseModel, Field

from specdit.domain.service import UserService
from specdit.domain.value import UserId


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: int
    old_password: str
    new_password: str = Field(min_length=6, max_length=72)


class ChangePasswordUseCase:
    """Use case for changing the authenticated user's password."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> None:
        """Execute change password flow.

        Raises:
            NotFoundError: If the user no longer exists
            AuthenticationError: If the old password is wrong
        """
        await self.user_service.change_password(
            UserId(request.user_id), request.old_password, request.new_password
        )
