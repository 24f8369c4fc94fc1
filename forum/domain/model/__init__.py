"""Domain model entities for the forum."""

from forum.domain.model.auth import AuthResult, TokenIdentity
from forum.domain.model.comment import Comment, CommentView
from forum.domain.model.like import Like, LikeStatus
from forum.domain.model.page import Page
from forum.domain.model.post import Post, PostView
from forum.domain.model.post_tag import (
    ModerationAction,
    ModerationResult,
    PostTag,
    TaggedPost,
)
from forum.domain.model.user import User, UserProfile

__all__ = [
    "AuthResult",
    "Comment",
    "CommentView",
    "Like",
    "LikeStatus",
    "ModerationAction",
    "ModerationResult",
    "Page",
    "Post",
    "PostTag",
    "PostView",
    "TaggedPost",
    "TokenIdentity",
    "User",
    "UserProfile",
]
