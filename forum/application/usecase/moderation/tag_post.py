"""Tag post use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import ModerationService
from forum.domain.value import PostId, TagKind, UserId

from .common import ModerationResponse


class TagPostRequest(BaseModel):
    """Tag post request."""

    post_id: int
    moderator_id: int  # From authenticated user
    tag: TagKind = TagKind.MISLEADING_INFORMATION


class TagPostUseCase(BaseUseCase):
    """Use case for a moderator flagging a post."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize tag post use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: TagPostRequest) -> ModerationResponse:
        """Execute tag flow.

        Raises:
            UnauthorizedError: If the caller's account no longer exists
            ForbiddenError: If the caller is not a moderator
            NotFoundError: If the post does not exist
            InvalidOperationError: If the post is already tagged
            ConflictError: If a concurrent request tagged it first
        """
        with logfire.span(
            "tag_post.execute",
            post_id=request.post_id,
            moderator_id=request.moderator_id,
        ):
            result = await self.moderation_service.tag_post(
                PostId(request.post_id), UserId(request.moderator_id), request.tag
            )
            return ModerationResponse.from_result(result)
