"""Subreddit routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from specdit.application.usecase.subreddit import (
    CreateSubredditRequest,
    CreateSubredditUseCase,
    DeleteSubredditRequest,
    DeleteSubredditUseCase,
    GetSubredditRequest,
    GetSubredditUseCase,
    ListSubredditsUseCase,
    UpdateSubredditRequest,
    UpdateSubredditUseCase,
)
from specdit.interface.api.dependencies import Authenticator
from specdit.interface.api.encoding import decode_id, envelope
from specdit.interface.error import http_error
from specdit.util.codec import IdCodec

router = APIRouter(prefix="/subreddits", tags=["subreddits"], route_class=DishkaRoute)


class SubredditAPIRequest(BaseModel):
    """API request for creating or renaming a subreddit."""

    name: str = Field(min_length=1, max_length=100)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_subreddit(
    request: SubredditAPIRequest,
    http_request: Request,
    create_subreddit_use_case: FromDishka[CreateSubredditUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Create a subreddit owned by the caller.

    Raises:
        HTTPException: 401 if not authenticated, 409 if the name is taken
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await create_subreddit_use_case.execute(
            CreateSubredditRequest(name=request.name, user_id=user_id)
        )
        return envelope(
            codec,
            result,
            message="Subreddit created successfully",
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as e:
        raise http_error(e, "creating subreddit") from e


@router.get("")
async def list_subreddits(
    list_subreddits_use_case: FromDishka[ListSubredditsUseCase],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """List every subreddit."""
    try:
        result = await list_subreddits_use_case.execute()
        return envelope(codec, result.subreddits)
    except Exception as e:
        raise http_error(e, "fetching subreddits") from e


@router.get("/{subreddit_id}")
async def get_subreddit(
    subreddit_id: str,
    get_subreddit_use_case: FromDishka[GetSubredditUseCase],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Get a subreddit with its creator and subscribers.

    Raises:
        HTTPException: 404 if the subreddit doesn't exist
    """
    try:
        result = await get_subreddit_use_case.execute(
            GetSubredditRequest(
                subreddit_id=decode_id(codec, subreddit_id, "Subreddit")
            )
        )
        return envelope(codec, result)
    except Exception as e:
        raise http_error(e, "fetching subreddit") from e


@router.put("/{subreddit_id}")
async def update_subreddit(
    subreddit_id: str,
    request: SubredditAPIRequest,
    http_request: Request,
    update_subreddit_use_case: FromDishka[UpdateSubredditUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Rename a subreddit.

    Raises:
        HTTPException: 403 if the caller isn't the creator
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await update_subreddit_use_case.execute(
            UpdateSubredditRequest(
                subreddit_id=decode_id(codec, subreddit_id, "Subreddit"),
                name=request.name,
                user_id=user_id,
            )
        )
        return envelope(codec, result, message="Subreddit updated successfully")
    except Exception as e:
        raise http_error(e, "updating subreddit") from e


@router.delete("/{subreddit_id}")
async def delete_subreddit(
    subreddit_id: str,
    http_request: Request,
    delete_subreddit_use_case: FromDishka[DeleteSubredditUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Delete a subreddit with everything posted in it.

    Raises:
        HTTPException: 403 if the caller isn't the creator
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        await delete_subreddit_use_case.execute(
            DeleteSubredditRequest(
                subreddit_id=decode_id(codec, subreddit_id, "Subreddit"),
                user_id=user_id,
            )
        )
        return envelope(codec, message="Subreddit deleted successfully")
    except Exception as e:
        raise http_error(e, "deleting subreddit") from e
