"""Refresh token use case."""

from typing import Optional

from pydantic import BaseModel

from forum.domain.service import AuthService

from .common import AuthResponse


class RefreshTokenRequest(BaseModel):
    """Refresh request."""

    access_token: str
    refresh_token: Optional[str] = None


class RefreshTokenUseCase:
    """Use case for exchanging tokens for a fresh pair."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: RefreshTokenRequest) -> AuthResponse:
        result = await self.auth_service.refresh_token(
            request.access_token, request.refresh_token
        )
        return AuthResponse.from_result(result)
