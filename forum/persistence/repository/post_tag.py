"""PostgreSQL implementation of PostTag repository."""

from typing import Optional

from sqlalchemy import and_, delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from forum.domain.model import PostTag, TaggedPost
from forum.domain.repository import PostTagRepository
from forum.domain.value import PostId, PostTagId, TagKind
from forum.persistence.mappers import (
    post_tag_to_dict,
    row_to_post_tag,
    row_to_tagged_post,
)
from forum.persistence.tables import post_tags_table, posts_table, users_table


class PostgresPostTagRepository(PostTagRepository):
    """PostgreSQL implementation of PostTagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post_and_tag(
        self, post_id: PostId, tag: TagKind
    ) -> Optional[PostTag]:
        """Find an active tag on a post."""
        stmt = select(post_tags_table).where(
            and_(
                post_tags_table.c.post_id == post_id,
                post_tags_table.c.tag == tag.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post_tag(row) if row else None

    async def find_by_post(self, post_id: PostId) -> list[PostTag]:
        """Find all tags on a post, newest first."""
        stmt = (
            select(post_tags_table)
            .where(post_tags_table.c.post_id == post_id)
            .order_by(desc(post_tags_table.c.created_at), desc(post_tags_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_post_tag(row) for row in result.mappings().all()]

    async def exists_for_post(self, post_id: PostId) -> bool:
        """Check whether a post carries any tag."""
        stmt = select(post_tags_table.c.id).where(post_tags_table.c.post_id == post_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def find_tagged(self, limit: int = 10, offset: int = 0) -> list[TaggedPost]:
        """Find tagged posts joined with author and moderator, newest tag first."""
        author = aliased(users_table, name="author")
        moderator = aliased(users_table, name="moderator")
        stmt = (
            select(
                post_tags_table.c.post_id,
                post_tags_table.c.tag,
                post_tags_table.c.created_by_user_id,
                post_tags_table.c.created_at.label("tagged_at"),
                posts_table.c.title,
                posts_table.c.content,
                posts_table.c.author_id,
                posts_table.c.created_at,
                author.c.username.label("author_username"),
                moderator.c.username.label("tagged_by_username"),
            )
            .select_from(post_tags_table)
            .join(posts_table, posts_table.c.id == post_tags_table.c.post_id)
            .join(author, author.c.id == posts_table.c.author_id)
            .join(moderator, moderator.c.id == post_tags_table.c.created_by_user_id)
            .order_by(desc(post_tags_table.c.created_at), desc(post_tags_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_tagged_post(row) for row in result.mappings().all()]

    async def count_tagged(self) -> int:
        """Count tag rows."""
        stmt = select(func.count()).select_from(post_tags_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post_tag: PostTag) -> PostTag:
        """Create a tag inside a savepoint."""
        stmt = (
            insert(post_tags_table)
            .values(**post_tag_to_dict(post_tag))
            .returning(post_tags_table.c.id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        tag_id = result.scalar_one()
        await self.session.flush()
        return post_tag.model_copy(update={"id": PostTagId(tag_id)})

    async def delete_by_post_and_tag(self, post_id: PostId, tag: TagKind) -> bool:
        """Delete a tag from a post."""
        stmt = delete(post_tags_table).where(
            and_(
                post_tags_table.c.post_id == post_id,
                post_tags_table.c.tag == tag.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
