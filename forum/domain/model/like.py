"""Like entity.

Business rules:
- At most one like per (post, user), enforced by a unique index
- Authors cannot like their own posts
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import LikeId, PostId, UserId


class Like(DomainModel):
    """A user's like on a post."""

    id: Optional[LikeId] = None
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class LikeStatus(DomainModel):
    """State of a user's like after a like/unlike action."""

    post_id: PostId
    is_liked: bool
    like_count: int = Field(ge=0)
    action_timestamp: datetime
