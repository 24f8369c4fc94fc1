"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from forum.domain.model import Post, PostView
from forum.domain.value import PostId, PostSortField, SortOrder, UserId


class PostFilter(BaseModel):
    """Conjunctive filters for post listings.

    ``tags`` holds lower-cased tag values; a post matches when any of its
    moderation tags is in the list.
    """

    author_id: Optional[UserId] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    tags: list[str] = []


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_view_by_id(self, post_id: PostId) -> Optional[PostView]:
        """Find a post with its computed counts and tag state.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post view if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists.

        Args:
            post_id: The post's unique identifier

        Returns:
            True if the post exists
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filters: PostFilter,
        sort_by: PostSortField = PostSortField.DATE,
        sort_order: SortOrder = SortOrder.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[PostView]:
        """Find posts with filtering, sorting and pagination.

        Ties are broken by post ID in the same direction as the sort.

        Args:
            filters: Filters applied conjunctively
            sort_by: Sort field (date or like count)
            sort_order: Sort direction
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of post views matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, filters: PostFilter) -> int:
        """Count posts matching the given filters.

        Args:
            filters: Filters applied conjunctively

        Returns:
            Total number of matching posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Create a post.

        Args:
            post: The post to store (without an ID)

        Returns:
            The stored post with its assigned ID
        """
        pass
