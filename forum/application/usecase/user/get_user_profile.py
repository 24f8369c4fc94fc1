"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.service import UserService
from forum.domain.value import UserId, UserRole


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: int


class GetUserProfileResponse(BaseModel):
    """Public profile. Never includes the email."""

    id: int
    username: str
    role: UserRole
    created_at: datetime
    post_count: int
    comment_count: int
    likes_received: int


class GetUserProfileUseCase:
    """Use case for a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        profile = await self.user_service.get_profile(UserId(request.user_id))
        return GetUserProfileResponse(**profile.model_dump())
