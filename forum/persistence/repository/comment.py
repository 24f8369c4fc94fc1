"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import Select, asc, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment, CommentView
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId, SortOrder
from forum.persistence.mappers import comment_to_dict, row_to_comment_view
from forum.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _view_select(self) -> Select:
        return select(
            comments_table, users_table.c.username.label("author_username")
        ).join(users_table, users_table.c.id == comments_table.c.author_id)

    async def find_by_id(self, comment_id: CommentId) -> Optional[CommentView]:
        """Find a comment by ID."""
        stmt = self._view_select().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment_view(row) if row else None

    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a comment exists."""
        stmt = select(comments_table.c.id).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_post(
        self,
        post_id: PostId,
        sort_order: SortOrder = SortOrder.ASC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[CommentView]:
        """Find comments for a post ordered by creation time."""
        direction = asc if sort_order == SortOrder.ASC else desc
        stmt = (
            self._view_select()
            .where(comments_table.c.post_id == post_id)
            .order_by(direction(comments_table.c.created_at), direction(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_view(row) for row in result.mappings().all()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Create a comment."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        comment_id = result.scalar_one()
        await self.session.flush()
        return comment.model_copy(update={"id": CommentId(comment_id)})
