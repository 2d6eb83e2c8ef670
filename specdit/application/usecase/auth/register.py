"""Register use case."""

from pydantic import BaseModel, Field

from specdit.application.usecase.common import UserView
from specdit.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    name: str | None = Field(default=None, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6, max_length=72)  # bcrypt input limit


class RegisterResponse(BaseModel):
    """Register response."""

    user: UserView
    token: str


class RegisterUseCase:
    """Use case for creating an account with email and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Args:
            request: Registration details

        Returns:
            The new user and a session token

        Raises:
            ConflictError: If the email is already registered
        """
        user = await self.user_service.register(
            email=request.email.strip().lower(),
            password=request.password,
            name=request.name,
        )
        token = self.jwt_service.create_token(user.id, user.email)
        return RegisterResponse(user=UserView.from_user(user), token=token)
