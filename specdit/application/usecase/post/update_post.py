"""Update post use case."""

from pydantic import BaseModel, Field

from specdit.application.usecase.common import PostView
from specdit.domain.service import PostService
from specdit.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None keep their current value.
    """

    post_id: int
    user_id: int
    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=40000)


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller isn't the author
        """
        post = await self.post_service.update_post(
            PostId(request.post_id),
            UserId(request.user_id),
            title=request.title.strip() if request.title is not None else None,
            content=request.content,
        )
        return PostView.from_post(post)
