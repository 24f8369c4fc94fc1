"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from forum.application.usecase.common import PagedResponse, PostItem
from forum.application.usecase.user import (
    GetUserPostsRequest,
    GetUserPostsUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: int,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile with engagement counts."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )


@router.get("/{user_id}/posts", response_model=PagedResponse[PostItem])
async def get_user_posts(
    user_id: int,
    get_user_posts_use_case: FromDishka[GetUserPostsUseCase],
    page: int = Query(default=1),
    page_size: int = Query(default=10, alias="pageSize"),
    sort_order: str = Query(default="desc", alias="sortOrder"),
) -> PagedResponse[PostItem]:
    """List a user's posts, newest first by default."""
    return await get_user_posts_use_case.execute(
        GetUserPostsRequest(
            user_id=user_id, page=page, page_size=page_size, sort_order=sort_order
        )
    )
