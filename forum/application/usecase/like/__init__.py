"""Like use cases."""

from .common import LikeStatusResponse
from .list_likes import ListLikesRequest, ListLikesResponse, ListLikesUseCase
from .toggle_like import ToggleLikeRequest, ToggleLikeUseCase
from .unlike import UnlikeRequest, UnlikeUseCase

__all__ = [
    "LikeStatusResponse",
    "ListLikesRequest",
    "ListLikesResponse",
    "ListLikesUseCase",
    "ToggleLikeRequest",
    "ToggleLikeUseCase",
    "UnlikeRequest",
    "UnlikeUseCase",
]
