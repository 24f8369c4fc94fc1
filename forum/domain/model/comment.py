"""Comment entity.

Comments are flat (no threading) and belong to exactly one post.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: Optional[CommentId] = None
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=3, max_length=2000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CommentView(Comment):
    """Comment with the author's username resolved."""

    id: CommentId
    author_username: str
