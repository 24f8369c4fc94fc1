"""User domain service."""

from typing import Optional, Sequence

import logfire

from forum.config import PaginationSettings
from forum.domain.error import NotFoundError
from forum.domain.model import Page, PostView, User, UserProfile
from forum.domain.repository import PostFilter, PostRepository, UserRepository
from forum.domain.value import PostSortField, SortOrder, UserId

from .base import Service
from .paging import check_page, parse_sort_order


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository
            pagination: Paging limits
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.pagination = pagination

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", user_id)
            return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID, or None."""
        return await self.user_repository.find_by_id(user_id)

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        return await self.user_repository.exists(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        with logfire.span("user_service.get_by_email"):
            return await self.user_repository.find_by_email(email.strip().lower())

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username (case-insensitive)."""
        with logfire.span("user_service.get_by_username", username=username):
            return await self.user_repository.find_by_username(username.strip())

    async def usernames_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, str]:
        """Resolve usernames for several users at once."""
        if not user_ids:
            return {}
        return await self.user_repository.find_usernames(list(set(user_ids)))

    async def is_moderator(self, user_id: UserId) -> bool:
        """Check whether a user holds the moderator role."""
        user = await self.user_repository.find_by_id(user_id)
        return bool(user and user.is_moderator)

    async def get_profile(self, user_id: UserId) -> UserProfile:
        """Get a user's public profile.

        Args:
            user_id: User ID

        Returns:
            Profile with post, comment and likes-received counts

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_profile", user_id=user_id):
            profile = await self.user_repository.find_profile(user_id)
            if not profile:
                logfire.warn("Profile requested for unknown user", user_id=user_id)
                raise NotFoundError("User", user_id)
            return profile

    async def get_user_posts(
        self,
        user_id: UserId,
        page: int = 1,
        page_size: int = 10,
        sort_order: str | SortOrder = SortOrder.DESC,
    ) -> Page[PostView]:
        """List a user's posts by creation date.

        Args:
            user_id: Author's user ID
            page: 1-based page number
            page_size: Items per page
            sort_order: asc/oldest or desc/newest

        Returns:
            Page of the user's posts

        Raises:
            ValidationError: If paging or sort parameters are invalid
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.get_user_posts",
            user_id=user_id,
            page=page,
            page_size=page_size,
        ):
            check_page(page, page_size, self.pagination.max_page_size)
            order = parse_sort_order(sort_order, allow_aliases=True)

            if not await self.user_repository.exists(user_id):
                raise NotFoundError("User", user_id)

            filters = PostFilter(author_id=user_id)
            total = await self.post_repository.count(filters)
            posts = await self.post_repository.find_all(
                filters,
                sort_by=PostSortField.DATE,
                sort_order=order,
                limit=page_size,
                offset=Page.offset(page, page_size),
            )
            return Page[PostView](
                items=posts, page=page, page_size=page_size, total_count=total
            )
