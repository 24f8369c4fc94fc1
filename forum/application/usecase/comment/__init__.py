"""Comment use cases."""

from .common import CommentItem
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsUseCase

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
]
