"""Get current user use case."""

from pydantic import BaseModel

from specdit.application.usecase.common import UserView
from specdit.domain.service import JWTService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # JWT token, if the caller sent one


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    authenticated: bool
    user: UserView | None = None


class GetCurrentUserUseCase:
    """Use case for reporting who, if anyone, is logged in."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Missing, invalid or expired tokens and deleted users all report
        unauthenticated instead of raising.

        Args:
            request: Request with optional JWT token

        Returns:
            Authentication status and the user if authenticated
        """
        user_id = self.jwt_service.get_user_id_from_token(request.token)
        if user_id is None:
            return GetCurrentUserResponse(authenticated=False)

        user = await self.user_service.find_by_id(user_id)
        if user is None:
            return GetCurrentUserResponse(authenticated=False)

        return GetCurrentUserResponse(authenticated=True, user=UserView.from_user(user))
