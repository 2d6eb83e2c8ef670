"""Create comment use case."""

from pydantic import BaseModel, Field

from specdit.application.usecase.comment.get_comments import CommentView
from specdit.domain.service import CommentService, PostService, UserService
from specdit.domain.value import CommentId, PostId, Tally, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    user_id: int
    text: str = Field(min_length=1, max_length=10000)
    reply_to_id: int | None = None


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post or the parent comment doesn't exist
            ValidationError: If the parent comment belongs to another post
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        author = await self.user_service.get_by_id(UserId(request.user_id))

        comment = await self.comment_service.create_comment(
            post_id=post.id,
            author_id=author.id,
            text=request.text,
            reply_to_id=(
                CommentId(request.reply_to_id)
                if request.reply_to_id is not None
                else None
            ),
        )
        return CommentView.from_comment(comment, Tally(), author)
