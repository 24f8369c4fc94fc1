"""Like domain service.

The unique index on (post_id, user_id) is the only guard against duplicate
likes. A uniqueness violation while liking means a concurrent request
already created the row, so the service reports the post as liked instead
of failing.
"""

from datetime import datetime, timezone

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import InvalidOperationError, NotFoundError
from forum.domain.model import Like, LikeStatus, Post
from forum.domain.repository import LikeRepository, PostRepository
from forum.domain.value import PostId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self, like_repository: LikeRepository, post_repository: PostRepository
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository
        """
        self.like_repository = like_repository
        self.post_repository = post_repository

    async def toggle(self, post_id: PostId, user_id: UserId) -> LikeStatus:
        """Like a post, or remove the like if one already exists.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Like state after the toggle

        Raises:
            NotFoundError: If the post does not exist
            InvalidOperationError: If the user authored the post
        """
        with logfire.span("like_service.toggle", post_id=post_id, user_id=user_id):
            await self._get_likeable_post(post_id, user_id)

            existing = await self.like_repository.find_by_post_and_user(
                post_id, user_id
            )
            if existing:
                await self.like_repository.delete_by_post_and_user(post_id, user_id)
                logfire.info("Post unliked", post_id=post_id, user_id=user_id)
                return await self._status(post_id, is_liked=False)

            return await self._like(post_id, user_id)

    async def unlike(self, post_id: PostId, user_id: UserId) -> LikeStatus:
        """Remove a user's like from a post.

        Raises:
            NotFoundError: If the post does not exist or the user has not liked it
        """
        with logfire.span("like_service.unlike", post_id=post_id, user_id=user_id):
            if not await self.post_repository.exists(post_id):
                raise NotFoundError("Post", post_id)

            deleted = await self.like_repository.delete_by_post_and_user(
                post_id, user_id
            )
            if not deleted:
                logfire.warn("No like to remove", post_id=post_id, user_id=user_id)
                raise NotFoundError("Like", f"post {post_id} by user {user_id}")

            logfire.info("Post unliked", post_id=post_id, user_id=user_id)
            return await self._status(post_id, is_liked=False)

    async def has_liked(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user likes a post."""
        return (
            await self.like_repository.find_by_post_and_user(post_id, user_id)
        ) is not None

    async def count_for_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return await self.like_repository.count_by_post(post_id)

    async def list_for_post(self, post_id: PostId) -> list[Like]:
        """List likes on a post, newest first.

        Raises:
            NotFoundError: If the post does not exist
        """
        if not await self.post_repository.exists(post_id):
            raise NotFoundError("Post", post_id)
        return await self.like_repository.find_by_post(post_id)

    async def _get_likeable_post(self, post_id: PostId, user_id: UserId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if not post:
            logfire.warn("Like on non-existent post", post_id=post_id)
            raise NotFoundError("Post", post_id)
        if post.author_id == user_id:
            logfire.warn("Self-like attempt", post_id=post_id, user_id=user_id)
            raise InvalidOperationError("Users cannot like their own posts")
        return post

    async def _like(self, post_id: PostId, user_id: UserId) -> LikeStatus:
        try:
            await self.like_repository.save(Like(post_id=post_id, user_id=user_id))
            logfire.info("Post liked", post_id=post_id, user_id=user_id)
        except IntegrityError:
            logfire.warn(
                "Concurrent like resolved as already liked",
                post_id=post_id,
                user_id=user_id,
            )
        return await self._status(post_id, is_liked=True)

    async def _status(self, post_id: PostId, is_liked: bool) -> LikeStatus:
        return LikeStatus(
            post_id=post_id,
            is_liked=is_liked,
            like_count=await self.like_repository.count_by_post(post_id),
            action_timestamp=datetime.now(timezone.utc),
        )
