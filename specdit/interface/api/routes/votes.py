"""Vote routes.

Voting is a toggle: resubmitting the same polarity removes the vote and
submitting the opposite one switches it.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from specdit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVotesRequest,
    GetVotesUseCase,
)
from specdit.domain.value import VotableType, VoteType
from specdit.interface.api.dependencies import Authenticator
from specdit.interface.api.encoding import decode_id, envelope
from specdit.interface.error import http_error
from specdit.util.codec import IdCodec

router = APIRouter(tags=["votes"], route_class=DishkaRoute)

_RESOURCE = {VotableType.POST: "Post", VotableType.COMMENT: "Comment"}


class VoteAPIRequest(BaseModel):
    """API request for casting a vote.

    The polarity is checked by the route, not by the model, so that a bad
    value yields the same 400 as a missing one.
    """

    model_config = ConfigDict(populate_by_name=True)

    vote_type: Any = Field(default=None, alias="voteType")


def _parse_vote_type(raw: Any) -> VoteType:
    try:
        if not isinstance(raw, str):
            raise ValueError(raw)
        return VoteType(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid vote type. Must be UP or DOWN",
        )


async def _cast_vote(
    votable_type: VotableType,
    votable_id: str,
    request: VoteAPIRequest,
    http_request: Request,
    cast_vote_use_case: CastVoteUseCase,
    authenticator: Authenticator,
    codec: IdCodec,
) -> JSONResponse:
    user_id = await authenticator.require_user_id(http_request)
    vote_type = _parse_vote_type(request.vote_type)

    try:
        result = await cast_vote_use_case.execute(
            CastVoteRequest(
                user_id=user_id,
                votable_type=votable_type,
                votable_id=decode_id(codec, votable_id, _RESOURCE[votable_type]),
                vote_type=vote_type,
            )
        )
        return envelope(codec, result.votes, message=result.message)
    except Exception as e:
        raise http_error(e, "voting") from e


async def _get_votes(
    votable_type: VotableType,
    votable_id: str,
    get_votes_use_case: GetVotesUseCase,
    codec: IdCodec,
) -> JSONResponse:
    try:
        result = await get_votes_use_case.execute(
            GetVotesRequest(
                votable_type=votable_type,
                votable_id=decode_id(codec, votable_id, _RESOURCE[votable_type]),
            )
        )
        return envelope(codec, result)
    except Exception as e:
        raise http_error(e, "fetching votes") from e


@router.post("/posts/{post_id}/vote")
async def vote_on_post(
    post_id: str,
    request: VoteAPIRequest,
    http_request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Upvote or downvote a post.

    Returns:
        The post's tally after the vote

    Raises:
        HTTPException: 400 for a bad vote type, 404 for an unknown post
    """
    return await _cast_vote(
        VotableType.POST,
        post_id,
        request,
        http_request,
        cast_vote_use_case,
        authenticator,
        codec,
    )


@router.post("/comments/{comment_id}/vote")
async def vote_on_comment(
    comment_id: str,
    request: VoteAPIRequest,
    http_request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Upvote or downvote a comment.

    Returns:
        The comment's tally after the vote

    Raises:
        HTTPException: 400 for a bad vote type, 404 for an unknown comment
    """
    return await _cast_vote(
        VotableType.COMMENT,
        comment_id,
        request,
        http_request,
        cast_vote_use_case,
        authenticator,
        codec,
    )


@router.get("/posts/{post_id}/votes")
async def get_post_votes(
    post_id: str,
    get_votes_use_case: FromDishka[GetVotesUseCase],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Get a post's tally."""
    return await _get_votes(VotableType.POST, post_id, get_votes_use_case, codec)


@router.get("/comments/{comment_id}/votes")
async def get_comment_votes(
    comment_id: str,
    get_votes_use_case: FromDishka[GetVotesUseCase],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Get a comment's tally."""
    return await _get_votes(VotableType.COMMENT, comment_id, get_votes_use_case, codec)
