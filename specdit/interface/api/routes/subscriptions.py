"""Subscription routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from specdit.application.usecase.subscription import (
    ListSubscriptionsRequest,
    ListSubscriptionsUseCase,
    SubscribeRequest,
    SubscribeUseCase,
    UnsubscribeRequest,
    UnsubscribeUseCase,
)
from specdit.interface.api.dependencies import Authenticator
from specdit.interface.api.encoding import decode_id, envelope
from specdit.interface.error import http_error
from specdit.util.codec import IdCodec

router = APIRouter(
    prefix="/subscriptions", tags=["subscriptions"], route_class=DishkaRoute
)


class SubscribeAPIRequest(BaseModel):
    """API request for subscribing to a subreddit."""

    subreddit_id: str  # External ID


@router.post("", status_code=status.HTTP_201_CREATED)
async def subscribe(
    request: SubscribeAPIRequest,
    http_request: Request,
    subscribe_use_case: FromDishka[SubscribeUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Subscribe the caller to a subreddit.

    Raises:
        HTTPException: 404 for an unknown subreddit, 409 if already subscribed
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await subscribe_use_case.execute(
            SubscribeRequest(
                subreddit_id=decode_id(codec, request.subreddit_id, "Subreddit"),
                user_id=user_id,
            )
        )
        return envelope(
            codec,
            result,
            message="Subscribed successfully",
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as e:
        raise http_error(e, "subscribing") from e


@router.delete("/{subreddit_id}")
async def unsubscribe(
    subreddit_id: str,
    http_request: Request,
    unsubscribe_use_case: FromDishka[UnsubscribeUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """Unsubscribe the caller from a subreddit.

    Raises:
        HTTPException: 404 if the caller isn't subscribed
    """
    user_id = await authenticator.require_user_id(http_request)

    try:
        await unsubscribe_use_case.execute(
            UnsubscribeRequest(
                subreddit_id=decode_id(codec, subreddit_id, "Subreddit"),
                user_id=user_id,
            )
        )
        return envelope(codec, message="Unsubscribed successfully")
    except Exception as e:
        raise http_error(e, "unsubscribing") from e


@router.get("")
async def list_subscriptions(
    http_request: Request,
    list_subscriptions_use_case: FromDishka[ListSubscriptionsUseCase],
    authenticator: FromDishka[Authenticator],
    codec: FromDishka[IdCodec],
) -> JSONResponse:
    """List the caller's subscriptions."""
    user_id = await authenticator.require_user_id(http_request)

    try:
        result = await list_subscriptions_use_case.execute(
            ListSubscriptionsRequest(user_id=user_id)
        )
        return envelope(codec, result.subscriptions)
    except Exception as e:
        raise http_error(e, "fetching subscriptions") from e
