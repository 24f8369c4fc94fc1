"""Moderation tag entity.

A post is "tagged" while a PostTag row exists for it. Untagging deletes the
row, so the only history kept is the currently active tag.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, PostTagId, TagKind, UserId


class ModerationAction(str, Enum):
    """Action reported by a moderation result."""

    TAGGED = "tagged"
    UNTAGGED = "untagged"


class PostTag(DomainModel):
    """Tag attached to a post by a moderator."""

    id: Optional[PostTagId] = None
    post_id: PostId
    tag: TagKind = TagKind.MISLEADING_INFORMATION
    created_by_user_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class TaggedPost(DomainModel):
    """Tagged post joined with its author and the tagging moderator."""

    id: PostId
    title: str
    content: str
    author_id: UserId
    author_username: str
    created_at: datetime
    tag: TagKind
    tagged_by_user_id: UserId
    tagged_by_username: str
    tagged_at: datetime


class ModerationResult(DomainModel):
    """Outcome of a tag or untag action."""

    post_id: PostId
    action: ModerationAction
    tag: TagKind
    moderator_id: UserId
    moderator_username: str
    action_timestamp: datetime
