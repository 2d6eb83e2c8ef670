"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_user_posts import (
    ListUserPostsRequest,
    ListUserPostsResponse,
    ListUserPostsUseCase,
)
from .list_voted_posts import (
    ListVotedPostsRequest,
    ListVotedPostsResponse,
    ListVotedPostsUseCase,
    VotedPostItem,
)
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListUserPostsRequest",
    "ListUserPostsResponse",
    "ListUserPostsUseCase",
    "ListVotedPostsRequest",
    "ListVotedPostsResponse",
    "ListVotedPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
    "VotedPostItem",
]
