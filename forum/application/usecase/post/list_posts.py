"""List posts use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from forum.application.usecase.common import PagedResponse, PostItem
from forum.domain.service import PostService
from forum.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request.

    Sort values are passed through as given; the domain service rejects
    unknown ones together with any other invalid parameter.
    """

    page: int = 1
    page_size: int = 10
    author_id: Optional[int] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    tags: Optional[str] = None  # Comma-separated
    sort_by: str = "date"
    sort_order: str = "desc"


class ListPostsUseCase:
    """Use case for listing posts with filtering and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> PagedResponse[PostItem]:
        """Execute list posts flow.

        Raises:
            ValidationError: If paging, filter or sort parameters are invalid
        """
        with logfire.span("list_posts.execute", page=request.page):
            page = await self.post_service.list_posts(
                page=request.page,
                page_size=request.page_size,
                author_id=(
                    UserId(request.author_id) if request.author_id is not None else None
                ),
                date_from=request.date_from,
                date_to=request.date_to,
                tags=request.tags,
                sort_by=request.sort_by,
                sort_order=request.sort_order,
            )
            return PagedResponse[PostItem].from_page(page, PostItem.from_view)
