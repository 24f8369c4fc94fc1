"""Create post use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.common import PostItem
from forum.domain.service import PostService
from forum.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    author_id: int  # From authenticated user


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If title or content break a rule
            NotFoundError: If the author does not exist
        """
        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create(
                title=request.title,
                content=request.content,
                author_id=UserId(request.author_id),
            )
            return PostItem.from_view(post)
