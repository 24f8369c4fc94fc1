"""Moderation use cases."""

from .common import ModerationResponse, TaggedPostItem
from .get_history import GetHistoryRequest, GetHistoryResponse, GetHistoryUseCase
from .list_tagged_posts import ListTaggedPostsRequest, ListTaggedPostsUseCase
from .tag_post import TagPostRequest, TagPostUseCase
from .untag_post import UntagPostRequest, UntagPostUseCase

__all__ = [
    "GetHistoryRequest",
    "GetHistoryResponse",
    "GetHistoryUseCase",
    "ListTaggedPostsRequest",
    "ListTaggedPostsUseCase",
    "ModerationResponse",
    "TagPostRequest",
    "TagPostUseCase",
    "TaggedPostItem",
    "UntagPostRequest",
    "UntagPostUseCase",
]
