"""Untag post use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import ModerationService
from forum.domain.value import PostId, TagKind, UserId

from .common import ModerationResponse


class UntagPostRequest(BaseModel):
    """Untag post request."""

    post_id: int
    moderator_id: int
    tag: TagKind = TagKind.MISLEADING_INFORMATION


class UntagPostUseCase(BaseUseCase):
    """Use case for a moderator removing a tag."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: UntagPostRequest) -> ModerationResponse:
        """Execute untag flow.

        Raises:
            UnauthorizedError: If the caller's account no longer exists
            ForbiddenError: If the caller is not a moderator
            NotFoundError: If the post carries no such tag
        """
        with logfire.span(
            "untag_post.execute",
            post_id=request.post_id,
            moderator_id=request.moderator_id,
        ):
            result = await self.moderation_service.untag_post(
                PostId(request.post_id), UserId(request.moderator_id), request.tag
            )
            return ModerationResponse.from_result(result)
