"""List likes use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.service import LikeService, UserService
from forum.domain.value import PostId


class LikeItem(BaseModel):
    """A like with the liking user's username."""

    user_id: int
    username: str
    created_at: datetime


class ListLikesRequest(BaseModel):
    """List likes request."""

    post_id: int


class ListLikesResponse(BaseModel):
    """Likes on a post, newest first."""

    post_id: int
    like_count: int
    likes: list[LikeItem]


class ListLikesUseCase:
    """Use case for listing who liked a post."""

    def __init__(self, like_service: LikeService, user_service: UserService) -> None:
        """Initialize list likes use case.

        Args:
            like_service: Like domain service
            user_service: User domain service (username lookup)
        """
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: ListLikesRequest) -> ListLikesResponse:
        """List likes with usernames resolved in one batch.

        Raises:
            NotFoundError: If the post does not exist
        """
        likes = await self.like_service.list_for_post(PostId(request.post_id))
        usernames = await self.user_service.usernames_by_ids(
            list({like.user_id for like in likes})
        )
        return ListLikesResponse(
            post_id=request.post_id,
            like_count=len(likes),
            likes=[
                LikeItem(
                    user_id=like.user_id,
                    username=usernames.get(like.user_id, ""),
                    created_at=like.created_at,
                )
                for like in likes
            ],
        )
