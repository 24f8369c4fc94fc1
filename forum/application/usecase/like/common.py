"""Like wire shapes."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import LikeStatus


class LikeStatusResponse(BaseModel):
    """Like state after a like or unlike."""

    post_id: int
    is_liked: bool
    like_count: int
    action_timestamp: datetime

    @classmethod
    def from_status(cls, status: LikeStatus) -> "LikeStatusResponse":
        return cls(
            post_id=status.post_id,
            is_liked=status.is_liked,
            like_count=status.like_count,
            action_timestamp=status.action_timestamp,
        )
