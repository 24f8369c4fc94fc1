"""Post routes."""

from datetime import datetime
from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from forum.application.usecase.common import PagedResponse, PostItem
from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from forum.domain.service import AuthService
from forum.interface.api.security import authenticate

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostBody(BaseModel):
    """Create post body."""

    title: str
    content: str


@router.get("", response_model=PagedResponse[PostItem])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1),
    page_size: int = Query(default=10, alias="pageSize"),
    author_id: Optional[int] = Query(default=None, alias="authorId"),
    date_from: Optional[datetime] = Query(default=None, alias="dateFrom"),
    date_to: Optional[datetime] = Query(default=None, alias="dateTo"),
    tags: Optional[str] = Query(
        default=None,
        description="Comma-separated tags, e.g. 'misleading or false information'",
    ),
    sort_by: str = Query(default="date", alias="sortBy"),
    sort_order: str = Query(default="desc", alias="sortOrder"),
) -> PagedResponse[PostItem]:
    """List posts.

    Filters combine with AND. ``tags`` is comma-separated and matches
    moderation tags case-insensitively. The only tag is
    ``misleading or false information``; other values match nothing.
    ``dateFrom`` and ``dateTo`` without an offset are read as UTC.
    ``sortBy`` is ``date`` or ``likeCount``; ``sortOrder`` is ``asc`` or
    ``desc``.
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(
            page=page,
            page_size=page_size,
            author_id=author_id,
            date_from=date_from,
            date_to=date_to,
            tags=tags,
            sort_by=sort_by,
            sort_order=sort_order,
        )
    )


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: CreatePostBody,
    auth_service: FromDishka[AuthService],
    create_post_use_case: FromDishka[CreatePostUseCase],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Create a post as the authenticated user.

    Args:
        body: Title and content
        auth_service: Auth service for token validation (injected)
        create_post_use_case: Create post use case from DI
        authorization: Bearer token header

    Returns:
        The created post with zeroed counts

    Raises:
        UnauthorizedError: If the token is missing or invalid
        ValidationError: If the title or content breaks any rule
    """
    identity = await authenticate(authorization, auth_service)
    return await create_post_use_case.execute(
        CreatePostRequest(
            title=body.title, content=body.content, author_id=identity.user_id
        )
    )


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostItem:
    """Get a post with its comment count, like count and tag state."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
