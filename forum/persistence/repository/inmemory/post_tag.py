"""In-memory post tag repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from forum.domain.model import PostTag, TaggedPost
from forum.domain.repository import PostTagRepository
from forum.domain.value import PostId, PostTagId, TagKind

from .store import InMemoryStore


class InMemoryPostTagRepository(PostTagRepository):
    """In-memory implementation of PostTagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _newest_first(self, tags) -> list[PostTag]:
        return sorted(tags, key=lambda t: (t.created_at, t.id), reverse=True)

    async def find_by_post_and_tag(
        self, post_id: PostId, tag: TagKind
    ) -> Optional[PostTag]:
        """Find an active tag on a post."""
        for post_tag in self._store.post_tags.values():
            if post_tag.post_id == post_id and post_tag.tag == tag:
                return post_tag
        return None

    async def find_by_post(self, post_id: PostId) -> list[PostTag]:
        """Find all tags on a post, newest first."""
        return self._newest_first(
            t for t in self._store.post_tags.values() if t.post_id == post_id
        )

    async def exists_for_post(self, post_id: PostId) -> bool:
        """Check whether a post carries any tag."""
        return any(t.post_id == post_id for t in self._store.post_tags.values())

    async def find_tagged(self, limit: int = 10, offset: int = 0) -> list[TaggedPost]:
        """Find tagged posts with author and moderator, newest tag first."""
        tagged = []
        for post_tag in self._newest_first(self._store.post_tags.values()):
            post = self._store.posts.get(post_tag.post_id)
            if not post:
                continue
            author = self._store.users.get(post.author_id)
            moderator = self._store.users.get(post_tag.created_by_user_id)
            tagged.append(
                TaggedPost(
                    id=post.id,
                    title=post.title,
                    content=post.content,
                    author_id=post.author_id,
                    author_username=author.username if author else "",
                    created_at=post.created_at,
                    tag=post_tag.tag,
                    tagged_by_user_id=post_tag.created_by_user_id,
                    tagged_by_username=moderator.username if moderator else "",
                    tagged_at=post_tag.created_at,
                )
            )
        return tagged[offset : offset + limit]

    async def count_tagged(self) -> int:
        """Count tag rows."""
        return len(self._store.post_tags)

    async def save(self, post_tag: PostTag) -> PostTag:
        """Save a tag.

        Raises:
            IntegrityError: If the post already carries this tag
        """
        if await self.find_by_post_and_tag(post_tag.post_id, post_tag.tag):
            raise IntegrityError("Duplicate post tag", None, Exception())

        saved = post_tag.model_copy(
            update={"id": PostTagId(self._store.next_id("post_tags"))}
        )
        self._store.post_tags[saved.id] = saved  # type: ignore[index]
        return saved

    async def delete_by_post_and_tag(self, post_id: PostId, tag: TagKind) -> bool:
        """Delete a tag from a post."""
        post_tag = await self.find_by_post_and_tag(post_id, tag)
        if not post_tag:
            return False
        del self._store.post_tags[post_tag.id]  # type: ignore[arg-type]
        return True
