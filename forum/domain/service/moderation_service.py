"""Moderation domain service.

Moderators flag posts as misleading by tagging them. Untagging deletes the
tag row, so history only ever shows the tag that is currently active.
"""

from datetime import datetime, timezone

import logfire
from sqlalchemy.exc import IntegrityError

from forum.config import PaginationSettings
from forum.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidOperationError,
    NotFoundError,
    UnauthorizedError,
)
from forum.domain.model import (
    ModerationAction,
    ModerationResult,
    Page,
    PostTag,
    TaggedPost,
    User,
)
from forum.domain.repository import PostRepository, PostTagRepository, UserRepository
from forum.domain.value import PostId, TagKind, UserId

from .base import Service
from .paging import check_page


class ModerationService(Service):
    """Domain service for moderation operations."""

    def __init__(
        self,
        post_tag_repository: PostTagRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            post_tag_repository: Post tag repository
            post_repository: Post repository
            user_repository: User repository (role checks)
            pagination: Paging limits
        """
        self.post_tag_repository = post_tag_repository
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.pagination = pagination

    async def tag_post(
        self,
        post_id: PostId,
        moderator_id: UserId,
        tag: TagKind = TagKind.MISLEADING_INFORMATION,
    ) -> ModerationResult:
        """Tag a post as misleading.

        The role check runs before the post lookup.

        Raises:
            UnauthorizedError: If the caller's user does not exist
            ForbiddenError: If the caller is not a moderator
            NotFoundError: If the post does not exist
            InvalidOperationError: If the post already carries the tag
            ConflictError: If a concurrent request tagged the post first
        """
        with logfire.span(
            "moderation_service.tag_post", post_id=post_id, moderator_id=moderator_id
        ):
            moderator = await self._require_moderator(moderator_id)

            if not await self.post_repository.exists(post_id):
                raise NotFoundError("Post", post_id)

            if await self.post_tag_repository.find_by_post_and_tag(post_id, tag):
                logfire.warn("Post already tagged", post_id=post_id)
                raise InvalidOperationError("Post is already tagged")

            try:
                saved = await self.post_tag_repository.save(
                    PostTag(post_id=post_id, tag=tag, created_by_user_id=moderator_id)
                )
            except IntegrityError:
                logfire.warn("Concurrent tag on post", post_id=post_id)
                raise ConflictError("Post is already tagged")

            logfire.info(
                "Post tagged",
                post_id=post_id,
                tag=tag.value,
                moderator_id=moderator_id,
            )
            return ModerationResult(
                post_id=post_id,
                action=ModerationAction.TAGGED,
                tag=tag,
                moderator_id=moderator_id,
                moderator_username=moderator.username,
                action_timestamp=saved.created_at,
            )

    async def untag_post(
        self,
        post_id: PostId,
        moderator_id: UserId,
        tag: TagKind = TagKind.MISLEADING_INFORMATION,
    ) -> ModerationResult:
        """Remove a tag from a post.

        Raises:
            UnauthorizedError: If the caller's user does not exist
            ForbiddenError: If the caller is not a moderator
            NotFoundError: If the post carries no such tag
        """
        with logfire.span(
            "moderation_service.untag_post",
            post_id=post_id,
            moderator_id=moderator_id,
        ):
            moderator = await self._require_moderator(moderator_id)

            deleted = await self.post_tag_repository.delete_by_post_and_tag(
                post_id, tag
            )
            if not deleted:
                logfire.warn("Untag on untagged post", post_id=post_id)
                raise NotFoundError("Post tag", post_id)

            logfire.info(
                "Post untagged",
                post_id=post_id,
                tag=tag.value,
                moderator_id=moderator_id,
            )
            return ModerationResult(
                post_id=post_id,
                action=ModerationAction.UNTAGGED,
                tag=tag,
                moderator_id=moderator_id,
                moderator_username=moderator.username,
                action_timestamp=datetime.now(timezone.utc),
            )

    async def list_tagged(
        self, page: int = 1, page_size: int = 10
    ) -> Page[TaggedPost]:
        """List tagged posts, most recently tagged first.

        Raises:
            ValidationError: If paging parameters are invalid
        """
        with logfire.span(
            "moderation_service.list_tagged", page=page, page_size=page_size
        ):
            check_page(page, page_size, self.pagination.max_page_size)
            total = await self.post_tag_repository.count_tagged()
            items = await self.post_tag_repository.find_tagged(
                limit=page_size, offset=Page.offset(page, page_size)
            )
            return Page[TaggedPost](
                items=items, page=page, page_size=page_size, total_count=total
            )

    async def is_tagged(self, post_id: PostId) -> bool:
        """Check whether a post carries any tag."""
        return await self.post_tag_repository.exists_for_post(post_id)

    async def is_moderator(self, user_id: UserId) -> bool:
        """Check whether a user holds the moderator role."""
        user = await self.user_repository.find_by_id(user_id)
        return bool(user and user.is_moderator)

    async def history(self, post_id: PostId) -> list[PostTag]:
        """List the tags currently on a post, newest first.

        Raises:
            NotFoundError: If the post does not exist
        """
        if not await self.post_repository.exists(post_id):
            raise NotFoundError("Post", post_id)
        return await self.post_tag_repository.find_by_post(post_id)

    async def _require_moderator(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise UnauthorizedError("User not found")
        if not user.is_moderator:
            logfire.warn("Moderation attempt by non-moderator", user_id=user_id)
            raise ForbiddenError("Only moderators can perform this action")
        return user
