"""Comment entity.

Comments are stored with a back-reference to the comment they reply to.
Only two levels are rendered: top-level comments and their direct replies.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from specdit.domain.model.common import DomainModel
from specdit.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    reply_to_id is None for top-level comments.
    """

    id: Optional[CommentId] = None
    post_id: PostId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    reply_to_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        """Whether this comment replies to the post itself."""
        return self.reply_to_id is None
