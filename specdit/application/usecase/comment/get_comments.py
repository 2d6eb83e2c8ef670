"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from specdit.application.usecase.common import UserSummary
from specdit.domain.model import Comment, User
from specdit.domain.service import (
    CommentNode,
    CommentService,
    PostService,
    UserService,
    VoteService,
    rank_comment_tree,
)
from specdit.domain.value import PostId, Tally, UserId, VotableType


class CommentView(BaseModel):
    """A comment with its tally, author and ranked replies."""

    id: int
    post_id: int
    author_id: int
    text: str
    reply_to_id: int | None
    created_at: datetime
    updated_at: datetime
    author: UserSummary | None = None
    votes: Tally
    replies: list["CommentView"] = []

    @classmethod
    def from_comment(
        cls, comment: Comment, votes: Tally, author: User | None = None
    ) -> "CommentView":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            text=comment.text,
            reply_to_id=comment.reply_to_id,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=UserSummary.from_user(author) if author else None,
            votes=votes,
        )

    @classmethod
    def from_node(cls, node: CommentNode, authors: dict[UserId, User]) -> "CommentView":
        view = cls.from_comment(
            node.comment, node.votes, authors.get(node.comment.author_id)
        )
        view.replies = [cls.from_node(reply, authors) for reply in node.replies]
        return view


async def load_ranked_comments(
    post_id: PostId,
    comment_service: CommentService,
    vote_service: VoteService,
    user_service: UserService,
) -> list[CommentView]:
    """Load a post's comment tree, ranked by score on both levels.

    Tallies and authors are fetched in one batch each.
    """
    comments = await comment_service.get_comments_for_post(post_id)
    tallies = await vote_service.tally_many(
        VotableType.COMMENT, [c.id for c in comments]
    )
    authors = await user_service.get_users_by_ids([c.author_id for c in comments])

    return [
        CommentView.from_node(node, authors)
        for node in rank_comment_tree(comments, tallies)
    ]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentView]


class GetCommentsUseCase:
    """Use case for retrieving the ranked comment tree of a post."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        comments = await load_ranked_comments(
            post.id, self.comment_service, self.vote_service, self.user_service
        )
        return GetCommentsResponse(comments=comments)
