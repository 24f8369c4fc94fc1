"""Post aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Title and content are stored trimmed. Posts are never deleted.
    """

    id: Optional[PostId] = None
    title: str = Field(min_length=5, max_length=200)
    content: str = Field(min_length=10, max_length=10000)
    author_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PostView(Post):
    """Post enriched with values computed from related rows at read time."""

    id: PostId
    author_username: str
    comment_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    is_tagged: bool = False
