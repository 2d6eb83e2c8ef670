"""Post routes."""

from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from specdit.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
    ListVotedPostsRequest,
    ListVotedPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from specdit.config import PaginationSettings
from specdit.domain.value import VoteType
from specdit.interface.api.dependencies import Authenticator
from specdit.interface.api.encoding import decode_id, envelope
from specdit.interface.error import http_error
from specdit.util.codec import IdCodec

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=40000)
    subreddit_id: str  # External ID


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=40000)


def _page_limit(limit: int | None, settings: PaginationSettings) -> int:
    if limit is None:
        return settings.default_limit
    return min(limit, settings.max_limit)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    http_request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Create a post in a subreddit.

    Raises:
        HTTPException: 401 if not authenticated, 404 for an unknown subreddit
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await create_post_use_case.execute(
            CreatePostRequest(
                title=request.title,
                content=request.content,
                subreddit_id=decode_id(codec, request.subreddit_id, "Subreddit"),
                user_id=user_id,
            )
        )
        return envelope(
            codec,
            result,
            message="Post created successfully",
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as e:
        raise http_error(e, "creating post") from e


@router.get("/me")
async def list_my_posts(
    http_request: Request,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    authenticator: FromDishka[Authenticator],
    pagination_settings: FromDishka[PaginationSettings],
    codec: FromDishka[IdCodec],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> JSONResponse:
    """Page through the caller's posts, newest first."""
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await list_user_posts_use_case.execute(
            ListUserPostsRequest(
                user_id=user_id,
                page=page,
                limit=_page_limit(limit, pagination_settings),
            )
        )
        return envelope(codec, result.posts, pagination=result.pagination)
    except Exception as e:
        raise http_error(e, "fetching posts") from e


@router.get("/user/{username}")
async def list_user_posts(
    username: str,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    pagination_settings: FromDishka[PaginationSettings],
    codec: FromDishka[IdCodec],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> JSONResponse:
    """Page through a user's posts, newest first.

    Raises:
        HTTPException: 404 if the user doesn't exist
    """
    try:
        result = await list_user_posts_use_case.execute(
            ListUserPostsRequest(
                username=username,
                page=page,
                limit=_page_limit(limit, pagination_settings),
            )
        )
        return envelope(codec, result.posts, pagination=result.pagination)
    except Exception as e:
        raise http_error(e, "fetching posts") from e


@router.get("/votes/me")
async def list_voted_posts(
    http_request: Request,
    list_voted_posts_use_case: FromDishka[ListVotedPostsUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
    vote_type: Literal["UP", "DOWN"] | None = Query(default=None),
) -> JSONResponse:
    """List the posts the caller voted on, most recent post first."""
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await list_voted_posts_use_case.execute(
            ListVotedPostsRequest(
                user_id=user_id,
                vote_type=VoteType(vote_type) if vote_type else None,
            )
        )
        return envelope(codec, result.posts)
    except Exception as e:
        raise http_error(e, "fetching voted posts") from e


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Get a post with its tally and ranked comment tree.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    try:
        result = await get_post_use_case.execute(
            GetPostRequest(post_id=decode_id(codec, post_id, "Post"))
        )
        return envelope(codec, result)
    except Exception as e:
        raise http_error(e, "fetching post") from e


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    http_request: Request,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Edit a post's title or content.

    Raises:
        HTTPException: 403 if the caller isn't the author
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=decode_id(codec, post_id, "Post"),
                user_id=user_id,
                title=request.title,
                content=request.content,
            )
        )
        return envelope(codec, result, message="Post updated successfully")
    except Exception as e:
        raise http_error(e, "updating post") from e


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    http_request: Request,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Delete a post with its comments and votes.

    Raises:
        HTTPException: 403 if the caller isn't the author
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        await delete_post_use_case.execute(
            DeletePostRequest(post_id=decode_id(codec, post_id, "Post"), user_id=user_id)
        )
        return envelope(codec, message="Post deleted successfully")
    except Exception as e:
        raise http_error(e, "deleting post") from e
