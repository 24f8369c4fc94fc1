"""PostgreSQL implementation of Like repository."""

from typing import Optional

from sqlalchemy import and_, delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import LikeId, PostId, UserId
from forum.persistence.mappers import like_to_dict, row_to_like
from forum.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.post_id == post_id,
                likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_like(row) if row else None

    async def find_by_post(self, post_id: PostId) -> list[Like]:
        """Find all likes on a post, newest first."""
        stmt = (
            select(likes_table)
            .where(likes_table.c.post_id == post_id)
            .order_by(desc(likes_table.c.created_at), desc(likes_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row) for row in result.mappings().all()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, like: Like) -> Like:
        """Create a like.

        Runs in a savepoint so a duplicate leaves the request transaction
        usable for the follow-up count.
        """
        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .returning(likes_table.c.id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        like_id = result.scalar_one()
        await self.session.flush()
        return like.model_copy(update={"id": LikeId(like_id)})

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's like on a post."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.post_id == post_id,
                likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
