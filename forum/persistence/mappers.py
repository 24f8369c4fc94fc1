"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Mapping

from forum.domain.model import (
    Comment,
    CommentView,
    Like,
    Post,
    PostTag,
    PostView,
    TaggedPost,
    User,
    UserProfile,
)
from forum.domain.value import (
    CommentId,
    LikeId,
    PostId,
    PostTagId,
    TagKind,
    UserId,
    UserRole,
)

Row = Mapping[str, Any]


def row_to_user(row: Row) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as mapping

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> dict[str, Any]:
    """Convert User domain model to an insert dict (ID is database-assigned)."""
    data = user.model_dump(exclude={"id"})
    data["role"] = user.role.value
    return data


def row_to_user_profile(row: Row) -> UserProfile:
    """Convert an aggregated profile row to UserProfile."""
    return UserProfile(
        id=UserId(row["id"]),
        username=row["username"],
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        post_count=row["post_count"] or 0,
        comment_count=row["comment_count"] or 0,
        likes_received=row["likes_received"] or 0,
    )


def row_to_post(row: Row) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        author_id=UserId(row["author_id"]),
        created_at=row["created_at"],
    )


def row_to_post_view(row: Row) -> PostView:
    """Convert a post row joined with counts to PostView.

    Expects ``author_username``, ``comment_count``, ``like_count`` and
    ``tag_count`` columns next to the post columns.
    """
    return PostView(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        author_id=UserId(row["author_id"]),
        author_username=row["author_username"],
        created_at=row["created_at"],
        comment_count=row["comment_count"] or 0,
        like_count=row["like_count"] or 0,
        is_tagged=(row["tag_count"] or 0) > 0,
    )


def post_to_dict(post: Post) -> dict[str, Any]:
    """Convert Post domain model to an insert dict."""
    return post.model_dump(exclude={"id"})


def row_to_comment_view(row: Row) -> CommentView:
    """Convert a comment row joined with its author to CommentView."""
    return CommentView(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        author_username=row["author_username"],
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> dict[str, Any]:
    """Convert Comment domain model to an insert dict."""
    return comment.model_dump(exclude={"id"})


def row_to_like(row: Row) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(row["id"]),
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> dict[str, Any]:
    """Convert Like domain model to an insert dict."""
    return like.model_dump(exclude={"id"})


def row_to_post_tag(row: Row) -> PostTag:
    """Convert database row to PostTag domain model."""
    return PostTag(
        id=PostTagId(row["id"]),
        post_id=PostId(row["post_id"]),
        tag=TagKind(row["tag"]),
        created_by_user_id=UserId(row["created_by_user_id"]),
        created_at=row["created_at"],
    )


def post_tag_to_dict(post_tag: PostTag) -> dict[str, Any]:
    """Convert PostTag domain model to an insert dict."""
    data = post_tag.model_dump(exclude={"id"})
    data["tag"] = post_tag.tag.value
    return data


def row_to_tagged_post(row: Row) -> TaggedPost:
    """Convert a post_tags row joined with post, author and moderator."""
    return TaggedPost(
        id=PostId(row["post_id"]),
        title=row["title"],
        content=row["content"],
        author_id=UserId(row["author_id"]),
        author_username=row["author_username"],
        created_at=row["created_at"],
        tag=TagKind(row["tag"]),
        tagged_by_user_id=UserId(row["created_by_user_id"]),
        tagged_by_username=row["tagged_by_username"],
        tagged_at=row["tagged_at"],
    )
