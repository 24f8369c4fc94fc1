"""In-memory post repository for testing."""

from typing import Optional

from forum.domain.model import Post, PostView
from forum.domain.repository import PostFilter, PostRepository
from forum.domain.value import PostId, PostSortField, SortOrder

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _to_view(self, post: Post) -> PostView:
        author = self._store.users.get(post.author_id)
        return PostView(
            **post.model_dump(exclude={"id"}),
            id=post.id,
            author_username=author.username if author else "",
            comment_count=sum(
                1 for c in self._store.comments.values() if c.post_id == post.id
            ),
            like_count=sum(
                1 for lk in self._store.likes.values() if lk.post_id == post.id
            ),
            is_tagged=any(
                t.post_id == post.id for t in self._store.post_tags.values()
            ),
        )

    def _matches(self, post: Post, filters: PostFilter) -> bool:
        if filters.author_id is not None and post.author_id != filters.author_id:
            return False
        if filters.date_from is not None and post.created_at < filters.date_from:
            return False
        if filters.date_to is not None and post.created_at > filters.date_to:
            return False
        if filters.tags:
            return any(
                t.post_id == post.id and t.tag.value.lower() in filters.tags
                for t in self._store.post_tags.values()
            )
        return True

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_view_by_id(self, post_id: PostId) -> Optional[PostView]:
        """Find a post with its computed counts."""
        post = self._store.posts.get(post_id)
        return self._to_view(post) if post else None

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        return post_id in self._store.posts

    async def find_all(
        self,
        filters: PostFilter,
        sort_by: PostSortField = PostSortField.DATE,
        sort_order: SortOrder = SortOrder.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[PostView]:
        """Find posts with filtering, sorting and pagination."""
        views = [
            self._to_view(p)
            for p in self._store.posts.values()
            if self._matches(p, filters)
        ]
        if sort_by == PostSortField.LIKE_COUNT:
            views.sort(key=lambda v: (v.like_count, v.id))
        else:
            views.sort(key=lambda v: (v.created_at, v.id))
        if sort_order == SortOrder.DESC:
            views.reverse()
        return views[offset : offset + limit]

    async def count(self, filters: PostFilter) -> int:
        """Count posts matching the filters."""
        return sum(1 for p in self._store.posts.values() if self._matches(p, filters))

    async def save(self, post: Post) -> Post:
        """Save a post."""
        saved = post.model_copy(update={"id": PostId(self._store.next_id("posts"))})
        self._store.posts[saved.id] = saved  # type: ignore[index]
        return saved
