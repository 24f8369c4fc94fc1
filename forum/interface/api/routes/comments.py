"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from forum.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from forum.application.usecase.common import PagedResponse
from forum.domain.service import AuthService
from forum.interface.api.security import authenticate

router = APIRouter(
    prefix="/api/posts/{post_id}/comments",
    tags=["comments"],
    route_class=DishkaRoute,
)


class CreateCommentBody(BaseModel):
    """Create comment body."""

    content: str


@router.get("", response_model=PagedResponse[CommentItem])
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int = Query(default=1),
    page_size: int = Query(default=10, alias="pageSize"),
    sort_order: str = Query(default="asc", alias="sortOrder"),
) -> PagedResponse[CommentItem]:
    """List a post's comments, oldest first by default."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            post_id=post_id, page=page, page_size=page_size, sort_order=sort_order
        )
    )


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: int,
    body: CreateCommentBody,
    auth_service: FromDishka[AuthService],
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Comment on a post as the authenticated user.

    Args:
        post_id: Post ID
        body: Comment content
        auth_service: Auth service for token validation (injected)
        create_comment_use_case: Create comment use case from DI
        authorization: Bearer token header

    Returns:
        The created comment with its author's username

    Raises:
        UnauthorizedError: If the token is missing or invalid
        NotFoundError: If the post does not exist
        ValidationError: If the content is too short or too long
    """
    identity = await authenticate(authorization, auth_service)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=post_id, content=body.content, author_id=identity.user_id
        )
    )
