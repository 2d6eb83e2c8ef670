"""Comment routes."""

from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from specdit.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    ListVotedCommentsRequest,
    ListVotedCommentsUseCase,
)
from specdit.domain.value import VoteType
from specdit.interface.api.dependencies import Authenticator
from specdit.interface.api.encoding import decode_id, decode_optional_id, envelope
from specdit.interface.error import http_error
from specdit.util.codec import IdCodec

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a post or replying to a comment."""

    text: str = Field(min_length=1, max_length=10000)
    reply_to_id: str | None = None  # External ID of the parent comment


@router.post("/posts/{post_id}/comments", status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    http_request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Comment on a post.

    Raises:
        HTTPException: 404 for an unknown post or parent, 400 if the parent
            belongs to another post
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=decode_id(codec, post_id, "Post"),
                user_id=user_id,
                text=request.text,
                reply_to_id=decode_optional_id(codec, request.reply_to_id, "Comment"),
            )
        )
        return envelope(
            codec,
            result,
            message="Comment created successfully",
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as e:
        raise http_error(e, "creating comment") from e


@router.get("/posts/{post_id}/comments")
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Get a post's comments as a ranked two-level tree.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    try:
        result = await get_comments_use_case.execute(
            GetCommentsRequest(post_id=decode_id(codec, post_id, "Post"))
        )
        return envelope(codec, result.comments)
    except Exception as e:
        raise http_error(e, "fetching comments") from e


@router.get("/comments/votes/me")
async def list_voted_comments(
    http_request: Request,
    list_voted_comments_use_case: FromDishka[ListVotedCommentsUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
    vote_type: Literal["UP", "DOWN"] | None = Query(default=None),
) -> JSONResponse:
    """List the comments the caller voted on, most recent comment first."""
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await list_voted_comments_use_case.execute(
            ListVotedCommentsRequest(
                user_id=user_id,
                vote_type=VoteType(vote_type) if vote_type else None,
            )
        )
        return envelope(codec, result.comments)
    except Exception as e:
        raise http_error(e, "fetching voted comments") from e


@router.delete("/comments/{comment_id}")
async def delete_comment(
    comment_id: str,
    http_request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Delete a comment with its replies and their votes.

    Raises:
        HTTPException: 403 if the caller isn't the author
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(
                comment_id=decode_id(codec, comment_id, "Comment"), user_id=user_id
            )
        )
        return envelope(codec, message="Comment deleted successfully")
    except Exception as e:
        raise http_error(e, "deleting comment") from e
