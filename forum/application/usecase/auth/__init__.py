"""Auth use cases."""

from .common import AuthResponse
from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .refresh_token import RefreshTokenRequest, RefreshTokenUseCase
from .register import RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RefreshTokenRequest",
    "RefreshTokenUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
