"""Get user posts use case."""

from pydantic import BaseModel

from forum.application.usecase.common import PagedResponse, PostItem
from forum.domain.service import UserService
from forum.domain.value import UserId


class GetUserPostsRequest(BaseModel):
    """Get user posts request. ``sort_order`` also accepts oldest/newest."""

    user_id: int
    page: int = 1
    page_size: int = 10
    sort_order: str = "desc"


class GetUserPostsUseCase:
    """Use case for paging through one user's posts."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserPostsRequest) -> PagedResponse[PostItem]:
        """Execute get user posts flow.

        Raises:
            ValidationError: If paging or sort parameters are invalid
            NotFoundError: If the user does not exist
        """
        page = await self.user_service.get_user_posts(
            UserId(request.user_id),
            page=request.page,
            page_size=request.page_size,
            sort_order=request.sort_order,
        )
        return PagedResponse[PostItem].from_page(page, PostItem.from_view)
