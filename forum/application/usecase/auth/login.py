"""Login use case."""

import logfire
from pydantic import BaseModel

from forum.domain.service import AuthService

from .common import AuthResponse


class LoginRequest(BaseModel):
    """Login request. ``identifier`` is a username or an email."""

    identifier: str
    password: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login.

        Raises:
            UnauthorizedError: If the credentials do not match
        """
        with logfire.span("login.execute"):
            result = await self.auth_service.login(request.identifier, request.password)
            return AuthResponse.from_result(result)
