"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from forum.application.usecase.like import (
    LikeStatusResponse,
    ListLikesRequest,
    ListLikesResponse,
    ListLikesUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
    UnlikeRequest,
    UnlikeUseCase,
)
from forum.domain.service import AuthService
from forum.interface.api.security import authenticate

router = APIRouter(prefix="/api/posts/{post_id}", tags=["likes"], route_class=DishkaRoute)


@router.post("/like", response_model=LikeStatusResponse)
async def toggle_like(
    post_id: int,
    auth_service: FromDishka[AuthService],
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    authorization: str | None = Header(default=None),
) -> LikeStatusResponse:
    """Like a post, or remove the like if the caller already likes it.

    Requires authentication.

    Args:
        post_id: Post ID
        auth_service: Auth service for token validation (injected)
        toggle_like_use_case: Toggle like use case from DI
        authorization: Bearer token header

    Returns:
        Like state and count after the toggle

    Raises:
        UnauthorizedError: If the token is missing or invalid
        NotFoundError: If the post does not exist
        InvalidOperationError: If the caller wrote the post
    """
    identity = await authenticate(authorization, auth_service)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(post_id=post_id, user_id=identity.user_id)
    )


@router.delete("/like", response_model=LikeStatusResponse)
async def unlike(
    post_id: int,
    auth_service: FromDishka[AuthService],
    unlike_use_case: FromDishka[UnlikeUseCase],
    authorization: str | None = Header(default=None),
) -> LikeStatusResponse:
    """Remove the caller's like.

    Requires authentication.

    Args:
        post_id: Post ID
        auth_service: Auth service for token validation (injected)
        unlike_use_case: Unlike use case from DI
        authorization: Bearer token header

    Returns:
        Like state and count after removal

    Raises:
        UnauthorizedError: If the token is missing or invalid
        NotFoundError: If the post does not exist or the caller has not liked it
    """
    identity = await authenticate(authorization, auth_service)
    return await unlike_use_case.execute(
        UnlikeRequest(post_id=post_id, user_id=identity.user_id)
    )


@router.get("/likes", response_model=ListLikesResponse)
async def list_likes(
    post_id: int,
    list_likes_use_case: FromDishka[ListLikesUseCase],
) -> ListLikesResponse:
    """List who liked a post, newest first."""
    return await list_likes_use_case.execute(ListLikesRequest(post_id=post_id))
