"""In-memory comment repository for testing."""

from typing import Optional

from forum.domain.model import Comment, CommentView
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId, SortOrder

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _to_view(self, comment: Comment) -> CommentView:
        author = self._store.users.get(comment.author_id)
        return CommentView(
            **comment.model_dump(exclude={"id"}),
            id=comment.id,
            author_username=author.username if author else "",
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[CommentView]:
        """Find a comment by ID."""
        comment = self._store.comments.get(comment_id)
        return self._to_view(comment) if comment else None

    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a comment exists."""
        return comment_id in self._store.comments

    async def find_by_post(
        self,
        post_id: PostId,
        sort_order: SortOrder = SortOrder.ASC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[CommentView]:
        """Find comments for a post ordered by creation time."""
        comments = sorted(
            (c for c in self._store.comments.values() if c.post_id == post_id),
            key=lambda c: (c.created_at, c.id),
            reverse=sort_order == SortOrder.DESC,
        )
        return [self._to_view(c) for c in comments[offset : offset + limit]]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._store.comments.values() if c.post_id == post_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        saved = comment.model_copy(
            update={"id": CommentId(self._store.next_id("comments"))}
        )
        self._store.comments[saved.id] = saved  # type: ignore[index]
        return saved
