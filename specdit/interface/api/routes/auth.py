"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from specdit.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from specdit.config import Settings
from specdit.interface.api.dependencies import BEARER_PREFIX, Authenticator
from specdit.interface.api.encoding import envelope
from specdit.interface.error import http_error
from specdit.util.codec import IdCodec

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the password."""

    old_password: str
    new_password: str = Field(min_length=6, max_length=72)


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=f"{BEARER_PREFIX}{token}",
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/",
        max_age=settings.auth.cookie_max_age_hours * 3600,
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
    codec: FromDishka[IdCodec],
    settings: FromDishka[Settings],
) -> JSONResponse:
    """Create an account and log it in.

    Returns:
        The new user and token; the token is also set as a cookie

    Raises:
        HTTPException: 409 if the email is already registered
    """
    try:
        result = await register_use_case.execute(request)
        response = envelope(
            codec,
            result,
            message="User registered successfully",
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as e:
        raise http_error(e, "registering user") from e

    _set_auth_cookie(response, result.token, settings)
    return response


@router.post("/login")
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
    codec: FromDishka[IdCodec],
    settings: FromDishka[Settings],
) -> JSONResponse:
    """Log in with email and password.

    Raises:
        HTTPException: 401 if the credentials are invalid
    """
    try:
        result = await login_use_case.execute(request)
        response = envelope(codec, result, message="Login successful")
    except Exception as e:
        raise http_error(e, "logging in") from e

    _set_auth_cookie(response, result.token, settings)
    return response


@router.post("/logout")
async def logout(
    codec: FromDishka[IdCodec],
    settings: FromDishka[Settings],
) -> JSONResponse:
    """Clear the auth cookie."""
    response = envelope(codec, message="Logged out successfully")
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return response


@router.patch("/change-password")
async def change_password(
    request: ChangePasswordAPIRequest,
    http_request: Request,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Change the authenticated user's password.

    Raises:
        HTTPException: 401 if not authenticated or the old password is wrong
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        await change_password_use_case.execute(
            ChangePasswordRequest(
                user_id=user_id,
                old_password=request.old_password,
                new_password=request.new_password,
            )
        )
    except Exception as e:
        raise http_error(e, "changing password") from e

    return envelope(codec, message="Password changed successfully")


@router.get("/me")
async def get_me(
    http_request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Report whether the caller is logged in, and as whom.

    Never fails on a missing or bad token.
    """
    try:
        result = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=authenticator.extract_token(http_request))
        )
        return envelope(codec, result)
    except Exception as e:
        raise http_error(e, "checking authentication") from e
