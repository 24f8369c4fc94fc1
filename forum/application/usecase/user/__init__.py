"""User use cases."""

from .get_user_posts import GetUserPostsRequest, GetUserPostsUseCase
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)

__all__ = [
    "GetUserPostsRequest",
    "GetUserPostsUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
]
