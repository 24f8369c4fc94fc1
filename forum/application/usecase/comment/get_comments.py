"""Get comments use case."""

from pydantic import BaseModel

from forum.application.usecase.common import PagedResponse
from forum.domain.service import CommentService
from forum.domain.value import PostId

from .common import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request. ``sort_order`` also accepts oldest/newest."""

    post_id: int
    page: int = 1
    page_size: int = 10
    sort_order: str = "asc"


class GetCommentsUseCase:
    """Use case for paging through a post's comments."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> PagedResponse[CommentItem]:
        """Execute get comments flow.

        Raises:
            ValidationError: If paging or sort parameters are invalid
            NotFoundError: If the post does not exist
        """
        page = await self.comment_service.get_for_post(
            PostId(request.post_id),
            page=request.page,
            page_size=request.page_size,
            sort_order=request.sort_order,
        )
        return PagedResponse[CommentItem].from_page(page, CommentItem.from_view)
