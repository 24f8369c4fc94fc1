"""In-memory like repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import LikeId, PostId, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _find(self, post_id: PostId, user_id: UserId) -> Optional[Like]:
        for like in self._store.likes.values():
            if like.post_id == post_id and like.user_id == user_id:
                return like
        return None

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        return self._find(post_id, user_id)

    async def find_by_post(self, post_id: PostId) -> list[Like]:
        """Find all likes on a post, newest first."""
        return sorted(
            (lk for lk in self._store.likes.values() if lk.post_id == post_id),
            key=lambda lk: (lk.created_at, lk.id),
            reverse=True,
        )

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return sum(1 for lk in self._store.likes.values() if lk.post_id == post_id)

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes the post
        """
        # No await between the check and the insert.
        if self._find(like.post_id, like.user_id):
            raise IntegrityError("Duplicate like", None, Exception())

        saved = like.model_copy(update={"id": LikeId(self._store.next_id("likes"))})
        self._store.likes[saved.id] = saved  # type: ignore[index]
        return saved

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's like on a post."""
        like = self._find(post_id, user_id)
        if not like:
            return False
        del self._store.likes[like.id]  # type: ignore[arg-type]
        return True
