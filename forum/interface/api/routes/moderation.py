"""Moderation routes. Every route requires the Moderator role."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from forum.application.usecase.common import PagedResponse
from forum.application.usecase.moderation import (
    GetHistoryRequest,
    GetHistoryResponse,
    GetHistoryUseCase,
    ListTaggedPostsRequest,
    ListTaggedPostsUseCase,
    ModerationResponse,
    TaggedPostItem,
    TagPostRequest,
    TagPostUseCase,
    UntagPostRequest,
    UntagPostUseCase,
)
from forum.domain.service import AuthService
from forum.interface.api.security import authenticate

router = APIRouter(
    prefix="/api/moderation/posts", tags=["moderation"], route_class=DishkaRoute
)


@router.get("/tagged", response_model=PagedResponse[TaggedPostItem])
async def list_tagged_posts(
    auth_service: FromDishka[AuthService],
    list_tagged_use_case: FromDishka[ListTaggedPostsUseCase],
    page: int = Query(default=1),
    page_size: int = Query(default=10, alias="pageSize"),
    authorization: str | None = Header(default=None),
) -> PagedResponse[TaggedPostItem]:
    """List tagged posts, most recently tagged first.

    Args:
        auth_service: Auth service for token validation (injected)
        list_tagged_use_case: List tagged posts use case from DI
        page: Page number, from 1
        page_size: Items per page
        authorization: Bearer token header

    Returns:
        A page of tagged posts with the tagging moderator

    Raises:
        UnauthorizedError: If the token is missing or invalid
        ForbiddenError: If the caller is not a moderator
        ValidationError: If the paging arguments are out of range
    """
    identity = await authenticate(authorization, auth_service)
    return await list_tagged_use_case.execute(
        ListTaggedPostsRequest(
            moderator_id=identity.user_id, page=page, page_size=page_size
        )
    )


@router.post("/{post_id}/tag", response_model=ModerationResponse)
async def tag_post(
    post_id: int,
    auth_service: FromDishka[AuthService],
    tag_post_use_case: FromDishka[TagPostUseCase],
    authorization: str | None = Header(default=None),
) -> ModerationResponse:
    """Tag a post as misleading or false information.

    Args:
        post_id: Post ID
        auth_service: Auth service for token validation (injected)
        tag_post_use_case: Tag post use case from DI
        authorization: Bearer token header

    Returns:
        The moderation action taken

    Raises:
        UnauthorizedError: If the token is missing or invalid
        ForbiddenError: If the caller is not a moderator
        NotFoundError: If the post does not exist
        InvalidOperationError: If the post is already tagged
    """
    identity = await authenticate(authorization, auth_service)
    return await tag_post_use_case.execute(
        TagPostRequest(post_id=post_id, moderator_id=identity.user_id)
    )


@router.delete("/{post_id}/tag", response_model=ModerationResponse)
async def untag_post(
    post_id: int,
    auth_service: FromDishka[AuthService],
    untag_post_use_case: FromDishka[UntagPostUseCase],
    authorization: str | None = Header(default=None),
) -> ModerationResponse:
    """Remove the tag from a post.

    Args:
        post_id: Post ID
        auth_service: Auth service for token validation (injected)
        untag_post_use_case: Untag post use case from DI
        authorization: Bearer token header

    Returns:
        The moderation action taken

    Raises:
        UnauthorizedError: If the token is missing or invalid
        ForbiddenError: If the caller is not a moderator
        NotFoundError: If the post does not exist or is not tagged
    """
    identity = await authenticate(authorization, auth_service)
    return await untag_post_use_case.execute(
        UntagPostRequest(post_id=post_id, moderator_id=identity.user_id)
    )


@router.get("/{post_id}/history", response_model=GetHistoryResponse)
async def get_history(
    post_id: int,
    auth_service: FromDishka[AuthService],
    history_use_case: FromDishka[GetHistoryUseCase],
    authorization: str | None = Header(default=None),
) -> GetHistoryResponse:
    """List the tags currently on a post.

    Untagging deletes the tag, so only current tags appear.

    Raises:
        UnauthorizedError: If the token is missing or invalid
        ForbiddenError: If the caller is not a moderator
        NotFoundError: If the post does not exist
    """
    identity = await authenticate(authorization, auth_service)
    return await history_use_case.execute(
        GetHistoryRequest(post_id=post_id, moderator_id=identity.user_id)
    )
