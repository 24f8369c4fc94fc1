"""Moderation history use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.error import ForbiddenError
from forum.domain.service import ModerationService, UserService
from forum.domain.value import PostId, TagKind, UserId


class HistoryItem(BaseModel):
    """One tag entry on a post."""

    id: int
    tag: TagKind
    created_by_user_id: int
    created_by_username: str
    created_at: datetime


class GetHistoryRequest(BaseModel):
    """Moderation history request."""

    post_id: int
    moderator_id: int


class GetHistoryResponse(BaseModel):
    """Tags currently on a post, newest first."""

    post_id: int
    entries: list[HistoryItem]


class GetHistoryUseCase:
    """Use case for a post's moderation history.

    Untagging deletes the tag row, so only the active tag is ever listed.
    """

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        """Initialize history use case.

        Args:
            moderation_service: Moderation domain service
            user_service: User domain service (username lookup)
        """
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: GetHistoryRequest) -> GetHistoryResponse:
        """Execute history flow.

        Raises:
            ForbiddenError: If the caller is not a moderator
            NotFoundError: If the post does not exist
        """
        if not await self.moderation_service.is_moderator(UserId(request.moderator_id)):
            raise ForbiddenError("Only moderators can perform this action")

        tags = await self.moderation_service.history(PostId(request.post_id))
        usernames = await self.user_service.usernames_by_ids(
            list({t.created_by_user_id for t in tags})
        )
        return GetHistoryResponse(
            post_id=request.post_id,
            entries=[
                HistoryItem(
                    id=t.id,  # type: ignore[arg-type]
                    tag=t.tag,
                    created_by_user_id=t.created_by_user_id,
                    created_by_username=usernames.get(t.created_by_user_id, ""),
                    created_at=t.created_at,
                )
                for t in tags
            ],
        )
