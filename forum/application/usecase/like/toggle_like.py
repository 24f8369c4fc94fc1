"""Toggle like use case."""

import logfire
from pydantic import BaseModel

from forum.domain.service import LikeService
from forum.domain.value import PostId, UserId

from .common import LikeStatusResponse


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: int
    user_id: int  # From authenticated user


class ToggleLikeUseCase:
    """Use case for liking a post, or removing an existing like."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> LikeStatusResponse:
        """Execute toggle flow.

        Raises:
            NotFoundError: If the post does not exist
            InvalidOperationError: If the user authored the post
        """
        with logfire.span(
            "toggle_like.execute", post_id=request.post_id, user_id=request.user_id
        ):
            status = await self.like_service.toggle(
                PostId(request.post_id), UserId(request.user_id)
            )
            return LikeStatusResponse.from_status(status)
