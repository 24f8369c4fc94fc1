"""Get current user use case."""

from pydantic import BaseModel

from forum.application.usecase.common import UserItem
from forum.domain.service import UserService
from forum.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: int


class GetCurrentUserUseCase:
    """Use case for loading the authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserItem:
        """Load the user behind the token.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return UserItem.from_user(user)
