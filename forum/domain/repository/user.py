"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model import User, UserProfile
from forum.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username, ignoring case.

        Args:
            username: Username to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case.

        Args:
            email: Email to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if the user exists
        """
        pass

    @abstractmethod
    async def find_usernames(self, user_ids: Sequence[UserId]) -> dict[UserId, str]:
        """Resolve usernames for several users in one query.

        Args:
            user_ids: IDs to resolve

        Returns:
            Mapping of user ID to username; unknown IDs are omitted
        """
        pass

    @abstractmethod
    async def find_profile(self, user_id: UserId) -> Optional[UserProfile]:
        """Load a user's public profile with engagement counts.

        Counts (posts, comments, likes received) are aggregated at read time.

        Args:
            user_id: The user's unique identifier

        Returns:
            The profile if the user exists, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create a user.

        Args:
            user: The user to store (without an ID)

        Returns:
            The stored user with its assigned ID

        Raises:
            IntegrityError: If the username or email is already taken
        """
        pass
