"""Unit tests for request authentication."""

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from specdit.domain.service import JWTService
from specdit.domain.value import UserId
from specdit.interface.api.dependencies import Authenticator
from tests.harness import create_env_fixture
from tests.unit.seed import seed_user

unit_env = create_env_fixture()


def make_request(
    authorization: str | None = None, cookie: str | None = None
) -> Request:
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode()))
    if cookie is not None:
        headers.append((b"cookie", cookie.encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


class TestExtractToken:
    """Tests for Authenticator.extract_token."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "authorization,cookie,expected",
        [
            ("Bearer header-token", None, "header-token"),
            (None, 'Authorization="Bearer cookie-token"', "cookie-token"),
            (None, "Authorization=bare-token", "bare-token"),
            ("Bearer header-token", "Authorization=cookie-token", "header-token"),
            ("Basic dXNlcjpwYXNz", "Authorization=cookie-token", "cookie-token"),
            (None, None, None),
            ("Bearer ", None, None),
        ],
    )
    async def test_token_sources(self, unit_env, authorization, cookie, expected):
        """The header wins over the cookie, and the cookie may be quoted."""
        authenticator = await unit_env.get(Authenticator)

        token = authenticator.extract_token(make_request(authorization, cookie))

        assert token == expected


class TestRequireUserId:
    """Tests for Authenticator.require_user_id."""

    @pytest.mark.asyncio
    async def test_valid_token(self, unit_env):
        """A token for an existing user yields that user's id."""
        authenticator = await unit_env.get(Authenticator)
        jwt_service = await unit_env.get(JWTService)
        user = await seed_user(unit_env)
        token = jwt_service.create_token(user.id, user.email)

        user_id = await authenticator.require_user_id(
            make_request(authorization=f"Bearer {token}")
        )

        assert user_id == user.id

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        authenticator = await unit_env.get(Authenticator)

        with pytest.raises(HTTPException) as exc_info:
            await authenticator.require_user_id(make_request())

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        authenticator = await unit_env.get(Authenticator)

        with pytest.raises(HTTPException) as exc_info:
            await authenticator.require_user_id(
                make_request(authorization="Bearer not-a-jwt")
            )

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid token"

    @pytest.mark.asyncio
    async def test_token_for_missing_user(self, unit_env):
        """Tokens outlive deleted users but no longer authenticate."""
        authenticator = await unit_env.get(Authenticator)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(UserId(404), "ghost@example.com")

        with pytest.raises(HTTPException) as exc_info:
            await authenticator.require_user_id(
                make_request(authorization=f"Bearer {token}")
            )

        assert exc_info.value.detail == "User not found"
