"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model import Comment, CommentView
from forum.domain.value import CommentId, PostId, SortOrder


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[CommentView]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment with its author's username, None if not found
        """
        pass

    @abstractmethod
    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a comment exists.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            True if the comment exists
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        sort_order: SortOrder = SortOrder.ASC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[CommentView]:
        """Find comments for a post ordered by creation time.

        Args:
            post_id: The post ID
            sort_order: ASC for oldest first, DESC for newest first
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments with their authors' usernames
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create a comment.

        Args:
            comment: The comment to store (without an ID)

        Returns:
            The stored comment with its assigned ID
        """
        pass
