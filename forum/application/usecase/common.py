"""Response shapes shared by several use cases."""

from datetime import datetime
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel

from forum.domain.model import Page, PostView, User
from forum.domain.value import UserRole

T = TypeVar("T")
S = TypeVar("S")


class PagedResponse(BaseModel, Generic[T]):
    """One page of a listing on the wire."""

    items: list[T]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_page(
        cls, page: Page[S], convert: Callable[[S], T]
    ) -> "PagedResponse[T]":
        """Build a response page, converting each item."""
        return cls(
            items=[convert(item) for item in page.items],
            page=page.page,
            page_size=page.page_size,
            total_count=page.total_count,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )


class UserItem(BaseModel):
    """User projection without the password hash."""

    id: int
    username: str
    email: str
    role: UserRole
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            id=user.id,  # type: ignore[arg-type]
            username=user.username,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        )


class PostItem(BaseModel):
    """Post with its read-time counts."""

    id: int
    title: str
    content: str
    author_id: int
    author_username: str
    created_at: datetime
    comment_count: int
    like_count: int
    is_tagged: bool

    @classmethod
    def from_view(cls, post: PostView) -> "PostItem":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            author_username=post.author_username,
            created_at=post.created_at,
            comment_count=post.comment_count,
            like_count=post.like_count,
            is_tagged=post.is_tagged,
        )
