"""List tagged posts use case."""

from pydantic import BaseModel

from forum.application.usecase.common import PagedResponse
from forum.domain.error import ForbiddenError
from forum.domain.service import ModerationService
from forum.domain.value import UserId

from .common import TaggedPostItem


class ListTaggedPostsRequest(BaseModel):
    """List tagged posts request."""

    moderator_id: int
    page: int = 1
    page_size: int = 10


class ListTaggedPostsUseCase:
    """Use case for the moderation queue of tagged posts."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(
        self, request: ListTaggedPostsRequest
    ) -> PagedResponse[TaggedPostItem]:
        """List tagged posts, most recently tagged first.

        Raises:
            ForbiddenError: If the caller is not a moderator
            ValidationError: If paging parameters are invalid
        """
        if not await self.moderation_service.is_moderator(UserId(request.moderator_id)):
            raise ForbiddenError("Only moderators can perform this action")

        page = await self.moderation_service.list_tagged(
            page=request.page, page_size=request.page_size
        )
        return PagedResponse[TaggedPostItem].from_page(
            page, TaggedPostItem.from_tagged
        )
