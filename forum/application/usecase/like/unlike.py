"""Unlike use case."""

from pydantic import BaseModel

from forum.domain.service import LikeService
from forum.domain.value import PostId, UserId

from .common import LikeStatusResponse


class UnlikeRequest(BaseModel):
    """Unlike request."""

    post_id: int
    user_id: int


class UnlikeUseCase:
    """Use case for removing a like."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: UnlikeRequest) -> LikeStatusResponse:
        """Remove the caller's like.

        Raises:
            NotFoundError: If the post does not exist or is not liked by the user
        """
        status = await self.like_service.unlike(
            PostId(request.post_id), UserId(request.user_id)
        )
        return LikeStatusResponse.from_status(status)
