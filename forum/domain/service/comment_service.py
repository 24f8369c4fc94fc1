"""Comment domain service."""

import logfire

from forum.config import PaginationSettings
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Comment, CommentView, Page
from forum.domain.repository import CommentRepository, PostRepository, UserRepository
from forum.domain.value import CommentId, PostId, SortOrder, UserId

from .base import Service
from .paging import check_page, parse_sort_order

CONTENT_MIN, CONTENT_MAX = 3, 2000


def comment_violations(content: str) -> list[str]:
    """List every rule a comment body breaks."""
    if not content or not content.strip():
        return ["Content cannot be empty or whitespace only"]

    errors: list[str] = []
    if content != content.strip():
        errors.append("Content cannot have leading or trailing whitespace")
    if not CONTENT_MIN <= len(content) <= CONTENT_MAX:
        errors.append(
            f"Content must be between {CONTENT_MIN} and {CONTENT_MAX} characters"
        )
    elif len(content.strip()) < CONTENT_MIN:
        errors.append(
            f"Content must contain at least {CONTENT_MIN} non-whitespace characters"
        )
    return errors


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (existence checks)
            user_repository: User repository (author checks)
            pagination: Paging limits
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.pagination = pagination

    async def create(
        self, post_id: PostId, content: str, author_id: UserId
    ) -> CommentView:
        """Create a comment on a post.

        Args:
            post_id: Post ID
            content: Comment text
            author_id: Author user ID

        Returns:
            Created comment with the author's username

        Raises:
            ValidationError: If the content breaks a rule
            NotFoundError: If the post or author does not exist
        """
        with logfire.span(
            "comment_service.create", post_id=post_id, author_id=author_id
        ):
            errors = comment_violations(content)
            if errors:
                logfire.warn("Comment rejected", post_id=post_id, errors=errors)
                raise ValidationError.from_errors(errors)

            if not await self.post_repository.exists(post_id):
                logfire.warn("Comment on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            author = await self.user_repository.find_by_id(author_id)
            if not author:
                raise NotFoundError("User", author_id)

            saved = await self.comment_repository.save(
                Comment(post_id=post_id, author_id=author_id, content=content.strip())
            )
            logfire.info("Comment created", comment_id=saved.id, post_id=post_id)
            return CommentView(
                **saved.model_dump(exclude={"id"}),
                id=saved.id,
                author_username=author.username,
            )

    async def get_for_post(
        self,
        post_id: PostId,
        page: int = 1,
        page_size: int = 10,
        sort_order: str | SortOrder = SortOrder.ASC,
    ) -> Page[CommentView]:
        """List comments on a post by creation time.

        Args:
            post_id: Post ID
            page: 1-based page number
            page_size: Items per page
            sort_order: asc/oldest or desc/newest

        Raises:
            ValidationError: If paging or sort parameters are invalid
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.get_for_post",
            post_id=post_id,
            page=page,
            page_size=page_size,
        ):
            check_page(page, page_size, self.pagination.max_page_size)
            order = parse_sort_order(sort_order, allow_aliases=True)

            if not await self.post_repository.exists(post_id):
                raise NotFoundError("Post", post_id)

            total = await self.comment_repository.count_by_post(post_id)
            comments = await self.comment_repository.find_by_post(
                post_id,
                sort_order=order,
                limit=page_size,
                offset=Page.offset(page, page_size),
            )
            return Page[CommentView](
                items=comments, page=page, page_size=page_size, total_count=total
            )

    async def get_by_id(self, comment_id: CommentId) -> CommentView:
        """Get a comment.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", comment_id)
        return comment

    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a comment exists."""
        return await self.comment_repository.exists(comment_id)

    async def count_for_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        return await self.comment_repository.count_by_post(post_id)
