"""User aggregate root.

Users register with a username, email and password. The role decides
whether they may moderate posts.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, UserRole


class User(DomainModel):
    """User aggregate root.

    ``id`` is None until the repository has stored the user.
    """

    id: Optional[UserId] = None
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(max_length=100)
    password_hash: str = Field(repr=False)
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_moderator(self) -> bool:
        return self.role == UserRole.MODERATOR


class UserProfile(DomainModel):
    """Public profile with engagement counts aggregated at read time.

    Email is deliberately absent.
    """

    id: UserId
    username: str
    role: UserRole
    created_at: datetime
    post_count: int = Field(ge=0)
    comment_count: int = Field(ge=0)
    likes_received: int = Field(ge=0)
