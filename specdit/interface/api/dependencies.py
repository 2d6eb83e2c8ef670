"""Request authentication for API routes."""

import logfire
from fastapi import HTTPException, Request, status

from specdit.config import AuthSettings
from specdit.domain.service import JWTService, UserService
from specdit.domain.value import UserId
from specdit.util.jwt import JWTError

BEARER_PREFIX = "Bearer "


class Authenticator:
    """Resolves the calling user from a request.

    The token is read from the ``Authorization: Bearer`` header first and
    from the auth cookie otherwise. Both carry ``Bearer <jwt>``.
    """

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize authenticator.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            auth_settings: Authentication settings (cookie name)
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.auth_settings = auth_settings

    def extract_token(self, request: Request) -> str | None:
        """Get the raw JWT from the request, if any."""
        header = request.headers.get("Authorization")
        if header and header.startswith(BEARER_PREFIX):
            return header[len(BEARER_PREFIX) :].strip() or None

        cookie = request.cookies.get(self.auth_settings.cookie_name)
        if not cookie:
            return None
        cookie = cookie.strip('"')
        if cookie.startswith(BEARER_PREFIX):
            cookie = cookie[len(BEARER_PREFIX) :]
        return cookie.strip() or None

    async def require_user_id(self, request: Request) -> UserId:
        """Authenticate the request.

        Returns:
            ID of the calling user

        Raises:
            HTTPException: 401 if the token is missing, invalid, expired, or
                belongs to a user that no longer exists
        """
        token = self.extract_token(request)
        if not token:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authentication required",
            )

        try:
            payload = self.jwt_service.verify_token(token)
        except JWTError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(e),
            )

        user = await self.user_service.find_by_id(UserId(payload.user_id))
        if not user:
            logfire.warn("Token for missing user", user_id=payload.user_id)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found",
            )
        return user.id
