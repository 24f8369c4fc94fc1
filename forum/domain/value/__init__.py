"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    LikeId,
    PostId,
    PostTagId,
    UserId,
)
from forum.domain.value.types import (
    Email,
    PostSortField,
    SortOrder,
    TagKind,
    UserRole,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "PostTagId",
    # Types
    "Email",
    "PostSortField",
    "SortOrder",
    "TagKind",
    "UserRole",
    "Username",
]
