"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService
from .like_service import LikeService
from .moderation_service import ModerationService
from .post_service import PostService
from .security_service import SecurityService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentService",
    "LikeService",
    "ModerationService",
    "PostService",
    "SecurityService",
    "Service",
    "UserService",
]
