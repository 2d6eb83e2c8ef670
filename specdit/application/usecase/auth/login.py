"""Login use case."""

from pydantic import BaseModel

from specdit.application.usecase.common import UserView
from specdit.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    user: UserView
    token: str


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login credentials

        Returns:
            The user and a session token

        Raises:
            AuthenticationError: If the credentials don't match
        """
        user = await self.user_service.authenticate(
            email=request.email.strip().lower(), password=request.password
        )
        token = self.jwt_service.create_token(user.id, user.email)
        return LoginResponse(user=UserView.from_user(user), token=token)
