"""Moderation wire shapes."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import ModerationAction, ModerationResult, TaggedPost
from forum.domain.value import TagKind


class ModerationResponse(BaseModel):
    """Outcome of a tag or untag action."""

    post_id: int
    action: ModerationAction
    tag: TagKind
    moderator_id: int
    moderator_username: str
    action_timestamp: datetime

    @classmethod
    def from_result(cls, result: ModerationResult) -> "ModerationResponse":
        return cls(**result.model_dump())


class TaggedPostItem(BaseModel):
    """Tagged post with author and tagging moderator."""

    id: int
    title: str
    content: str
    author_id: int
    author_username: str
    created_at: datetime
    tag: TagKind
    tagged_by_user_id: int
    tagged_by_username: str
    tagged_at: datetime

    @classmethod
    def from_tagged(cls, post: TaggedPost) -> "TaggedPostItem":
        return cls(**post.model_dump())
