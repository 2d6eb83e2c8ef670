"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import (
    CommentView,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    load_ranked_comments,
)
from .list_voted_comments import (
    ListVotedCommentsRequest,
    ListVotedCommentsResponse,
    ListVotedCommentsUseCase,
    VotedCommentItem,
)

__all__ = [
    "CommentView",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ListVotedCommentsRequest",
    "ListVotedCommentsResponse",
    "ListVotedCommentsUseCase",
    "VotedCommentItem",
    "load_ranked_comments",
]
