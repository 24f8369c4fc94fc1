"""Register use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, field_validator

from forum.domain.service import AuthService
from forum.domain.value import UserRole

from .common import AuthResponse


class RegisterRequest(BaseModel):
    """Register request.

    ``role`` accepts "User"/"Moderator" in any case or the ordinals 0/1.
    """

    username: str
    email: str
    password: str
    role: Optional[UserRole] = None

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, v: object) -> Optional[UserRole]:
        if v is None:
            return None
        return UserRole.parse(v)  # type: ignore[arg-type]


class RegisterUseCase:
    """Use case for registering a new account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Auth domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Register the user and issue their first tokens.

        Raises:
            ValidationError: If any field breaks a rule
            ConflictError: If the username or email is taken
        """
        with logfire.span("register.execute", username=request.username):
            result = await self.auth_service.register(
                username=request.username,
                email=request.email,
                password=request.password,
                role=request.role,
            )
            return AuthResponse.from_result(result)
