"""Get post use case."""

from pydantic import BaseModel

from forum.application.usecase.common import PostItem
from forum.domain.service import PostService
from forum.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase:
    """Use case for loading a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Load the post with its counts.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_by_id(PostId(request.post_id))
        return PostItem.from_view(post)
