"""Subscription use cases."""

from .list_subscriptions import (
    ListSubscriptionsRequest,
    ListSubscriptionsResponse,
    ListSubscriptionsUseCase,
    SubscriptionItem,
)
from .subscribe import SubscribeRequest, SubscribeUseCase, SubscriptionResponse
from .unsubscribe import UnsubscribeRequest, UnsubscribeUseCase

__all__ = [
    "ListSubscriptionsRequest",
    "ListSubscriptionsResponse",
    "ListSubscriptionsUseCase",
    "SubscribeRequest",
    "SubscribeUseCase",
    "SubscriptionItem",
    "SubscriptionResponse",
    "UnsubscribeRequest",
    "UnsubscribeUseCase",
]
