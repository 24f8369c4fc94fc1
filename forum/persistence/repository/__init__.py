"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.like import PostgresLikeRepository
from forum.persistence.repository.post import PostgresPostRepository
from forum.persistence.repository.post_tag import PostgresPostTagRepository
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresPostRepository",
    "PostgresPostTagRepository",
    "PostgresUserRepository",
]
