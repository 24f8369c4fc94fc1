"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.like import LikeRepository
from forum.domain.repository.post import PostFilter, PostRepository
from forum.domain.repository.post_tag import PostTagRepository
from forum.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "LikeRepository",
    "PostFilter",
    "PostRepository",
    "PostTagRepository",
    "UserRepository",
]
