"""Subreddit use cases."""

from .create_subreddit import CreateSubredditRequest, CreateSubredditUseCase
from .delete_subreddit import DeleteSubredditRequest, DeleteSubredditUseCase
from .get_subreddit import (
    GetSubredditRequest,
    GetSubredditResponse,
    GetSubredditUseCase,
    SubscriberView,
)
from .list_subreddits import ListSubredditsResponse, ListSubredditsUseCase
from .update_subreddit import UpdateSubredditRequest, UpdateSubredditUseCase

__all__ = [
    "CreateSubredditRequest",
    "CreateSubredditUseCase",
    "DeleteSubredditRequest",
    "DeleteSubredditUseCase",
    "GetSubredditRequest",
    "GetSubredditResponse",
    "GetSubredditUseCase",
    "ListSubredditsResponse",
    "ListSubredditsUseCase",
    "SubscriberView",
    "UpdateSubredditRequest",
    "UpdateSubredditUseCase",
]
