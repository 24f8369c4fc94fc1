"""Post domain service."""

from datetime import datetime, timezone
from typing import Optional

import logfire

from forum.config import PaginationSettings
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Page, Post, PostView
from forum.domain.repository import PostFilter, PostRepository, UserRepository
from forum.domain.value import PostId, PostSortField, SortOrder, UserId

from .base import Service
from .paging import page_errors

TITLE_MIN, TITLE_MAX = 5, 200
CONTENT_MIN, CONTENT_MAX = 10, 10000


def post_violations(title: str, content: str) -> list[str]:
    """List every rule a new post's title and content break."""
    errors: list[str] = []

    if not title or not title.strip():
        errors.append("Title cannot be empty or whitespace only")
    else:
        if title != title.strip():
            errors.append("Title cannot have leading or trailing whitespace")
        if not TITLE_MIN <= len(title) <= TITLE_MAX:
            errors.append(
                f"Title must be between {TITLE_MIN} and {TITLE_MAX} characters"
            )

    if not content or not content.strip():
        errors.append("Content cannot be empty or whitespace only")
    elif not CONTENT_MIN <= len(content) <= CONTENT_MAX:
        errors.append(
            f"Content must be between {CONTENT_MIN} and {CONTENT_MAX} characters"
        )
    elif len(content.strip()) < CONTENT_MIN:
        errors.append(
            f"Content must contain at least {CONTENT_MIN} non-whitespace characters"
        )

    return errors


def parse_tags(tags: Optional[str | list[str]]) -> list[str]:
    """Split a comma-separated tag filter into trimmed, lower-cased values."""
    if not tags:
        return []
    parts = tags.split(",") if isinstance(tags, str) else tags
    return [t.strip().lower() for t in parts if t.strip()]


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read a datetime without an offset as UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            user_repository: User repository (author checks)
            pagination: Paging limits
        """
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.pagination = pagination

    async def create(self, title: str, content: str, author_id: UserId) -> PostView:
        """Create a post.

        Title and content are validated as given and stored trimmed.

        Args:
            title: Post title
            content: Post body
            author_id: Author's user ID

        Returns:
            The created post with zeroed counts

        Raises:
            ValidationError: If any title/content rule is broken (all reported)
            NotFoundError: If the author does not exist
        """
        with logfire.span("post_service.create", author_id=author_id):
            errors = post_violations(title, content)
            if errors:
                logfire.warn("Post rejected", author_id=author_id, errors=errors)
                raise ValidationError.from_errors(errors)

            if not await self.user_repository.exists(author_id):
                raise NotFoundError("User", author_id)

            saved = await self.post_repository.save(
                Post(title=title.strip(), content=content.strip(), author_id=author_id)
            )
            logfire.info("Post created", post_id=saved.id, author_id=author_id)
            return await self.get_by_id(saved.id)  # type: ignore[arg-type]

    async def list_posts(
        self,
        page: int = 1,
        page_size: int = 10,
        author_id: Optional[UserId] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        tags: Optional[str | list[str]] = None,
        sort_by: str | PostSortField = PostSortField.DATE,
        sort_order: str | SortOrder = SortOrder.DESC,
    ) -> Page[PostView]:
        """List posts with filtering, sorting and pagination.

        Filters are combined with AND. A page past the end is empty but keeps
        the real total count. Dates without an offset are read as UTC.

        Raises:
            ValidationError: If paging, filter or sort parameters are invalid
        """
        date_from, date_to = as_utc(date_from), as_utc(date_to)

        with logfire.span(
            "post_service.list_posts",
            page=page,
            page_size=page_size,
            author_id=author_id,
            sort_by=sort_by,
            sort_order=sort_order,
        ):
            errors = page_errors(page, page_size, self.pagination.max_page_size)
            if author_id is not None and author_id <= 0:
                errors.append("Author ID must be greater than 0")
            if date_from and date_to and date_from > date_to:
                errors.append("Date from cannot be later than date to")

            sort_field = self._parse_sort_field(sort_by, errors)
            order = self._parse_sort_order(sort_order, errors)

            if errors:
                logfire.warn("Invalid post listing request", errors=errors)
                raise ValidationError.from_errors(errors)

            filters = PostFilter(
                author_id=author_id,
                date_from=date_from,
                date_to=date_to,
                tags=parse_tags(tags),
            )
            total = await self.post_repository.count(filters)
            posts = await self.post_repository.find_all(
                filters,
                sort_by=sort_field,  # type: ignore[arg-type]
                sort_order=order,  # type: ignore[arg-type]
                limit=page_size,
                offset=Page.offset(page, page_size),
            )
            logfire.info("Posts listed", count=len(posts), total=total)
            return Page[PostView](
                items=posts, page=page, page_size=page_size, total_count=total
            )

    async def get_by_id(self, post_id: PostId) -> PostView:
        """Get a post with its computed counts.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_id", post_id=post_id):
            post = await self.post_repository.find_view_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)
            return post

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        return await self.post_repository.exists(post_id)

    async def get_author_id(self, post_id: PostId) -> UserId:
        """Get the author of a post.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_repository.find_by_id(post_id)
        if not post:
            raise NotFoundError("Post", post_id)
        return post.author_id

    @staticmethod
    def _parse_sort_field(
        value: str | PostSortField, errors: list[str]
    ) -> Optional[PostSortField]:
        if isinstance(value, PostSortField):
            return value
        try:
            return PostSortField(value.strip().lower())
        except ValueError:
            errors.append(f"Invalid sort field '{value}'. Use 'date' or 'likeCount'")
            return None

    @staticmethod
    def _parse_sort_order(
        value: str | SortOrder, errors: list[str]
    ) -> Optional[SortOrder]:
        if isinstance(value, SortOrder):
            return value
        try:
            return SortOrder(value.strip().lower())
        except ValueError:
            errors.append(f"Invalid sort order '{value}'. Use 'asc' or 'desc'")
            return None
