"""Authentication results."""

from datetime import datetime

from forum.domain.model.common import DomainModel
from forum.domain.model.user import User
from forum.domain.value import UserId, UserRole


class TokenIdentity(DomainModel):
    """Identity carried by a validated access token."""

    user_id: UserId
    username: str
    email: str
    role: UserRole


class AuthResult(DomainModel):
    """Tokens issued by register, login or refresh.

    ``expires_in`` is in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "Bearer"
    expires_in: int
    expires_at: datetime
    user: User
