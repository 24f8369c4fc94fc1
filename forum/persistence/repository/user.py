"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User, UserProfile
from forum.domain.repository import UserRepository
from forum.domain.value import UserId
from forum.persistence.mappers import row_to_user, row_to_user_profile, user_to_dict
from forum.persistence.tables import (
    comments_table,
    likes_table,
    posts_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username, ignoring case."""
        stmt = select(users_table).where(
            func.lower(users_table.c.username) == username.lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        stmt = select(users_table).where(users_table.c.email == email.lower())
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        stmt = select(users_table.c.id).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_usernames(self, user_ids: Sequence[UserId]) -> dict[UserId, str]:
        """Resolve usernames for several users in one query."""
        if not user_ids:
            return {}
        stmt = select(users_table.c.id, users_table.c.username).where(
            users_table.c.id.in_(user_ids)
        )
        result = await self.session.execute(stmt)
        return {UserId(row.id): row.username for row in result.fetchall()}

    async def find_profile(self, user_id: UserId) -> Optional[UserProfile]:
        """Load a user's public profile with engagement counts."""
        post_count = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_id == users_table.c.id)
            .scalar_subquery()
        )
        comment_count = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.author_id == users_table.c.id)
            .scalar_subquery()
        )
        likes_received = (
            select(func.count())
            .select_from(likes_table)
            .join(posts_table, likes_table.c.post_id == posts_table.c.id)
            .where(posts_table.c.author_id == users_table.c.id)
            .scalar_subquery()
        )
        stmt = select(
            users_table.c.id,
            users_table.c.username,
            users_table.c.role,
            users_table.c.created_at,
            post_count.label("post_count"),
            comment_count.label("comment_count"),
            likes_received.label("likes_received"),
        ).where(users_table.c.id == user_id)

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user_profile(row) if row else None

    async def save(self, user: User) -> User:
        """Create a user.

        Runs in a savepoint so a uniqueness violation leaves the request
        transaction usable.
        """
        stmt = (
            insert(users_table)
            .values(**user_to_dict(user))
            .returning(users_table.c.id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        user_id = result.scalar_one()
        await self.session.flush()
        return user.model_copy(update={"id": UserId(user_id)})
