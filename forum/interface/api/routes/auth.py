"""Authentication routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel

from forum.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RefreshTokenRequest,
    RefreshTokenUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from forum.application.usecase.common import UserItem
from forum.domain.service import AuthService
from forum.interface.api.security import authenticate, bearer_token

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


class RefreshBody(BaseModel):
    """Refresh body.

    The access token may come in the body or in the Authorization header.
    """

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Register a new account and sign in.

    Role defaults to User; "Moderator" (or 1) creates a moderator.
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Sign in with username or email and password."""
    return await login_use_case.execute(request)


@router.post("/refresh", response_model=AuthResponse)
async def refresh(
    body: RefreshBody,
    refresh_use_case: FromDishka[RefreshTokenUseCase],
    authorization: str | None = Header(default=None),
) -> AuthResponse:
    """Exchange a still-valid access token for a fresh token pair.

    The access token comes from the body or, failing that, the
    ``Authorization`` header.

    Args:
        body: Access and refresh tokens
        refresh_use_case: Refresh token use case from DI
        authorization: Bearer token header

    Returns:
        A new access and refresh token pair

    Raises:
        UnauthorizedError: If either token is invalid or the user is gone
    """
    access_token = body.access_token or bearer_token(authorization)
    return await refresh_use_case.execute(
        RefreshTokenRequest(
            access_token=access_token, refresh_token=body.refresh_token
        )
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Sign out.

    Tokens are stateless, so this only checks the caller is authenticated;
    the client discards its tokens.
    """
    await authenticate(authorization, auth_service)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserItem)
async def get_current_user(
    auth_service: FromDishka[AuthService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserItem:
    """Get the authenticated user.

    Args:
        auth_service: Auth service for token validation (injected)
        get_current_user_use_case: Current user use case from DI
        authorization: Bearer token header

    Returns:
        The caller's account, email included

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    identity = await authenticate(authorization, auth_service)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=identity.user_id)
    )
