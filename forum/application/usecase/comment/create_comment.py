"""Create comment use case."""

import logfire
from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import PostId, UserId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    content: str
    author_id: int  # From authenticated user


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            ValidationError: If the content breaks a rule
            NotFoundError: If the post or author does not exist
        """
        with logfire.span(
            "create_comment.execute",
            post_id=request.post_id,
            author_id=request.author_id,
        ):
            comment = await self.comment_service.create(
                post_id=PostId(request.post_id),
                content=request.content,
                author_id=UserId(request.author_id),
            )
            return CommentItem.from_view(comment)
