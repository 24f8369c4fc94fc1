"""Post tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model import PostTag, TaggedPost
from forum.domain.value import PostId, TagKind


class PostTagRepository(ABC):
    """Repository for moderation tags.

    The (post_id, tag) pair is unique.
    """

    @abstractmethod
    async def find_by_post_and_tag(
        self, post_id: PostId, tag: TagKind
    ) -> Optional[PostTag]:
        """Find an active tag on a post.

        Args:
            post_id: The post ID
            tag: Tag kind

        Returns:
            The tag if present, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[PostTag]:
        """Find all tags on a post, newest first.

        Args:
            post_id: The post ID

        Returns:
            List of tags on the post
        """
        pass

    @abstractmethod
    async def exists_for_post(self, post_id: PostId) -> bool:
        """Check whether a post carries any tag.

        Args:
            post_id: The post ID

        Returns:
            True if at least one tag exists
        """
        pass

    @abstractmethod
    async def find_tagged(self, limit: int = 10, offset: int = 0) -> list[TaggedPost]:
        """Find tagged posts joined with author and moderator, newest tag first.

        Args:
            limit: Maximum number of rows to return
            offset: Number of rows to skip

        Returns:
            List of tagged posts
        """
        pass

    @abstractmethod
    async def count_tagged(self) -> int:
        """Count tag rows.

        Returns:
            Number of active tags
        """
        pass

    @abstractmethod
    async def save(self, post_tag: PostTag) -> PostTag:
        """Create a tag.

        Args:
            post_tag: The tag to store (without an ID)

        Returns:
            The stored tag with its assigned ID

        Raises:
            IntegrityError: If the post already carries this tag
        """
        pass

    @abstractmethod
    async def delete_by_post_and_tag(self, post_id: PostId, tag: TagKind) -> bool:
        """Delete a tag from a post.

        Args:
            post_id: The post ID
            tag: Tag kind

        Returns:
            True if a tag was deleted, False if none existed
        """
        pass
