"""Auth response shared by register, login and refresh."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.common import UserItem
from forum.domain.model import AuthResult


class AuthResponse(BaseModel):
    """Issued tokens plus the signed-in user."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int
    expires_at: datetime
    user: UserItem

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            token_type=result.token_type,
            expires_in=result.expires_in,
            expires_at=result.expires_at,
            user=UserItem.from_user(result.user),
        )
