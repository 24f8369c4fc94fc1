"""PostgreSQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, and_, asc, desc, exists, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post, PostView
from forum.domain.repository import PostFilter, PostRepository
from forum.domain.value import PostId, PostSortField, SortOrder
from forum.persistence.mappers import post_to_dict, row_to_post, row_to_post_view
from forum.persistence.tables import (
    comments_table,
    likes_table,
    post_tags_table,
    posts_table,
    users_table,
)


def _comment_count():
    return (
        select(func.count())
        .select_from(comments_table)
        .where(comments_table.c.post_id == posts_table.c.id)
        .scalar_subquery()
    )


def _like_count():
    return (
        select(func.count())
        .select_from(likes_table)
        .where(likes_table.c.post_id == posts_table.c.id)
        .scalar_subquery()
    )


def _tag_count():
    return (
        select(func.count())
        .select_from(post_tags_table)
        .where(post_tags_table.c.post_id == posts_table.c.id)
        .scalar_subquery()
    )


def _apply_filters(stmt: Select, filters: PostFilter) -> Select:
    """Add WHERE clauses for every filter that is set."""
    if filters.author_id is not None:
        stmt = stmt.where(posts_table.c.author_id == filters.author_id)
    if filters.date_from is not None:
        stmt = stmt.where(posts_table.c.created_at >= filters.date_from)
    if filters.date_to is not None:
        stmt = stmt.where(posts_table.c.created_at <= filters.date_to)
    if filters.tags:
        stmt = stmt.where(
            exists().where(
                and_(
                    post_tags_table.c.post_id == posts_table.c.id,
                    func.lower(post_tags_table.c.tag).in_(filters.tags),
                )
            )
        )
    return stmt


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Comment count, like count and tag state are computed with correlated
    sub-queries on every read; nothing is denormalised onto the post row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _view_select(self) -> Select:
        return select(
            posts_table,
            users_table.c.username.label("author_username"),
            _comment_count().label("comment_count"),
            _like_count().label("like_count"),
            _tag_count().label("tag_count"),
        ).join(users_table, users_table.c.id == posts_table.c.author_id)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(row) if row else None

    async def find_view_by_id(self, post_id: PostId) -> Optional[PostView]:
        """Find a post with its computed counts and tag state."""
        with logfire.span("post_repository.find_view_by_id", post_id=post_id):
            stmt = self._view_select().where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_post_view(row) if row else None

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        stmt = select(posts_table.c.id).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_all(
        self,
        filters: PostFilter,
        sort_by: PostSortField = PostSortField.DATE,
        sort_order: SortOrder = SortOrder.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[PostView]:
        """Find posts with filtering, sorting and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort_by=sort_by.value,
            sort_order=sort_order.value,
            limit=limit,
            offset=offset,
        ):
            stmt = _apply_filters(self._view_select(), filters)

            direction = asc if sort_order == SortOrder.ASC else desc
            if sort_by == PostSortField.LIKE_COUNT:
                stmt = stmt.order_by(direction(_like_count()))
            else:
                stmt = stmt.order_by(direction(posts_table.c.created_at))
            stmt = stmt.order_by(direction(posts_table.c.id))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post_view(row) for row in result.mappings().all()]
            logfire.debug("Found posts", count=len(posts))
            return posts

    async def count(self, filters: PostFilter) -> int:
        """Count posts matching the given filters."""
        stmt = _apply_filters(select(func.count()).select_from(posts_table), filters)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Create a post."""
        with logfire.span("post_repository.save", author_id=post.author_id):
            stmt = (
                insert(posts_table)
                .values(**post_to_dict(post))
                .returning(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            post_id = result.scalar_one()
            await self.session.flush()
            return post.model_copy(update={"id": PostId(post_id)})
