"""Comment wire shape."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import CommentView


class CommentItem(BaseModel):
    """Comment with its author's username."""

    id: int
    post_id: int
    author_id: int
    author_username: str
    content: str
    created_at: datetime

    @classmethod
    def from_view(cls, comment: CommentView) -> "CommentItem":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            author_username=comment.author_username,
            content=comment.content,
            created_at=comment.created_at,
        )
