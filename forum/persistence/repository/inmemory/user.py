"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from forum.domain.model import User, UserProfile
from forum.domain.repository import UserRepository
from forum.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username, ignoring case."""
        wanted = username.lower()
        for user in self._store.users.values():
            if user.username.lower() == wanted:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        wanted = email.lower()
        for user in self._store.users.values():
            if user.email.lower() == wanted:
                return user
        return None

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        return user_id in self._store.users

    async def find_usernames(self, user_ids: Sequence[UserId]) -> dict[UserId, str]:
        """Resolve usernames for several users."""
        return {
            uid: self._store.users[uid].username
            for uid in user_ids
            if uid in self._store.users
        }

    async def find_profile(self, user_id: UserId) -> Optional[UserProfile]:
        """Load a user's public profile with engagement counts."""
        user = self._store.users.get(user_id)
        if not user:
            return None

        authored = {p.id for p in self._store.posts.values() if p.author_id == user_id}
        return UserProfile(
            id=user_id,
            username=user.username,
            role=user.role,
            created_at=user.created_at,
            post_count=len(authored),
            comment_count=sum(
                1 for c in self._store.comments.values() if c.author_id == user_id
            ),
            likes_received=sum(
                1 for lk in self._store.likes.values() if lk.post_id in authored
            ),
        )

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If the username (any case) or email is taken
        """
        if await self.find_by_username(user.username) or await self.find_by_email(
            user.email
        ):
            raise IntegrityError("Duplicate user", None, Exception())

        saved = user.model_copy(update={"id": UserId(self._store.next_id("users"))})
        self._store.users[saved.id] = saved  # type: ignore[index]
        return saved
