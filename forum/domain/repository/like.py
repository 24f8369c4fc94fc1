"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model import Like
from forum.domain.value import PostId, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    The (post_id, user_id) pair is unique; the store, not the caller, is the
    authority on that invariant.
    """

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's like on a post.

        Args:
            post_id: The post ID
            user_id: The user's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[Like]:
        """Find all likes on a post, newest first.

        Args:
            post_id: The post ID

        Returns:
            List of likes on the post
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of likes
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Create a like.

        Args:
            like: The like to store (without an ID)

        Returns:
            The stored like with its assigned ID

        Raises:
            IntegrityError: If the user already likes the post
        """
        pass

    @abstractmethod
    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's like on a post.

        Args:
            post_id: The post ID
            user_id: The user's ID

        Returns:
            True if a like was deleted, False if none existed
        """
        pass
