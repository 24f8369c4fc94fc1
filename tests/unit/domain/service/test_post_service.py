"""Unit tests for PostService."""

from datetime import datetime, timedelta, timezone

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Like, PostTag
from forum.domain.repository import (
    LikeRepository,
    PostRepository,
    PostTagRepository,
    UserRepository,
)
from forum.domain.service import PostService
from forum.domain.value import PostId, UserRole
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_post_stores_trimmed_content(self, unit_env):
        """Created post reads back with trimmed content and zero counts."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo)

        # Act
        created = await post_service.create(
            title="Hello world",
            content="  Body text that is long enough  ",
            author_id=author.id,
        )
        fetched = await post_service.get_by_id(created.id)

        # Assert
        assert fetched.title == "Hello world"
        assert fetched.content == "Body text that is long enough"
        assert fetched.author_username == "alice"
        assert fetched.comment_count == 0
        assert fetched.like_count == 0
        assert fetched.is_tagged is False

    @pytest.mark.asyncio
    async def test_create_post_reports_all_violations(self, unit_env):
        """Short title and short content are both reported."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo)

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await post_service.create(title="abc", content="short", author_id=author.id)

        # Assert
        assert exc_info.value.errors == [
            "Title must be between 5 and 200 characters",
            "Content must be between 10 and 10000 characters",
        ]

    @pytest.mark.asyncio
    async def test_create_post_rejects_padded_title(self, unit_env):
        """Titles with surrounding whitespace are rejected."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo)

        # Act & Assert
        with pytest.raises(ValidationError, match="leading or trailing whitespace"):
            await post_service.create(
                title=" Hello world ",
                content="Body text that is long enough",
                author_id=author.id,
            )

    @pytest.mark.asyncio
    async def test_create_post_for_missing_author(self, unit_env):
        """Unknown author raises NotFoundError."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found: 42"):
            await post_service.create(
                title="Hello world",
                content="Body text that is long enough",
                author_id=42,
            )


class TestGetPost:
    """Tests for get_by_id and get_author_id."""

    @pytest.mark.asyncio
    async def test_get_missing_post(self, unit_env):
        """Unknown post raises NotFoundError."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found: 999"):
            await post_service.get_by_id(PostId(999))

    @pytest.mark.asyncio
    async def test_get_author_id(self, unit_env):
        """The author of a stored post is returned."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(user_repo)
        post = await make_post(post_repo, author.id)

        # Act
        author_id = await post_service.get_author_id(post.id)

        # Assert
        assert author_id == author.id
        assert await post_service.exists(post.id)
        assert not await post_service.exists(PostId(post.id + 1))


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_pagination_over_twenty_five_posts(self, unit_env):
        """25 posts at page size 10 span 3 pages; page 4 is empty."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(user_repo)
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(25):
            await make_post(post_repo, author.id, created_at=start + timedelta(hours=i))

        # Act
        first = await post_service.list_posts(page=1, page_size=10)
        last = await post_service.list_posts(page=3, page_size=10)
        beyond = await post_service.list_posts(page=4, page_size=10)

        # Assert
        assert first.total_count == 25
        assert first.total_pages == 3
        assert first.has_next and not first.has_previous
        assert len(last.items) == 5
        assert not last.has_next
        assert beyond.items == []
        assert beyond.total_count == 25

    @pytest.mark.asyncio
    async def test_default_order_is_newest_first(self, unit_env):
        """Without sort arguments, the newest post comes first."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await make_user(user_repo)
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        older = await make_post(post_repo, author.id, created_at=start)
        newer = await make_post(
            post_repo, author.id, created_at=start + timedelta(days=1)
        )

        # Act
        page = await post_service.list_posts()

        # Assert
        assert [p.id for p in page.items] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_sort_by_like_count(self, unit_env):
        """likeCount sorting orders posts by number of likes."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        author = await make_user(user_repo)
        fans = [await make_user(user_repo, username=f"fan_{i}") for i in range(2)]
        quiet = await make_post(post_repo, author.id)
        popular = await make_post(post_repo, author.id)
        for fan in fans:
            await like_repo.save(Like(post_id=popular.id, user_id=fan.id))

        # Act
        page = await post_service.list_posts(sort_by="likeCount", sort_order="DESC")

        # Assert
        assert [p.id for p in page.items] == [popular.id, quiet.id]
        assert page.items[0].like_count == 2

    @pytest.mark.asyncio
    async def test_filter_by_author_and_dates(self, unit_env):
        """Author and date filters are combined."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        alice = await make_user(user_repo, username="alice")
        bob = await make_user(user_repo, username="bob")
        day = datetime(2024, 3, 1, tzinfo=timezone.utc)
        await make_post(post_repo, alice.id, created_at=day - timedelta(days=10))
        wanted = await make_post(post_repo, alice.id, created_at=day)
        await make_post(post_repo, bob.id, created_at=day)

        # Act
        page = await post_service.list_posts(
            author_id=alice.id,
            date_from=day - timedelta(days=1),
            date_to=day + timedelta(days=1),
        )

        # Assert
        assert [p.id for p in page.items] == [wanted.id]
        assert page.total_count == 1

    @pytest.mark.asyncio
    async def test_naive_dates_are_read_as_utc(self, unit_env):
        """Dates without an offset filter stored posts as UTC."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        alice = await make_user(user_repo, username="alice")
        await make_post(
            post_repo, alice.id, created_at=datetime(2024, 2, 1, tzinfo=timezone.utc)
        )
        wanted = await make_post(
            post_repo, alice.id, created_at=datetime(2024, 3, 1, tzinfo=timezone.utc)
        )

        # Act
        page = await post_service.list_posts(
            date_from=datetime(2024, 2, 15), date_to=datetime(2024, 3, 15)
        )

        # Assert
        assert [p.id for p in page.items] == [wanted.id]

    @pytest.mark.asyncio
    async def test_mixed_naive_and_aware_dates(self, unit_env):
        """A naive and an offset-aware bound can be combined."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        alice = await make_user(user_repo, username="alice")
        post = await make_post(
            post_repo, alice.id, created_at=datetime(2025, 6, 1, tzinfo=timezone.utc)
        )

        # Act
        page = await post_service.list_posts(
            date_from=datetime(2024, 1, 1),
            date_to=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )

        # Assert
        assert [p.id for p in page.items] == [post.id]

    @pytest.mark.asyncio
    async def test_mixed_dates_in_wrong_order(self, unit_env):
        """A naive start after an aware end is a validation error."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await post_service.list_posts(
                date_from=datetime(2030, 1, 1),
                date_to=datetime(2024, 1, 1, tzinfo=timezone.utc),
            )

        # Assert
        assert exc_info.value.errors == ["Date from cannot be later than date to"]

    @pytest.mark.asyncio
    async def test_filter_by_tag_ignores_case(self, unit_env):
        """Only tagged posts match a tag filter."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        tag_repo = await unit_env.get(PostTagRepository)
        author = await make_user(user_repo)
        moderator = await make_user(user_repo, username="mod", role=UserRole.MODERATOR)
        tagged = await make_post(post_repo, author.id)
        await make_post(post_repo, author.id)
        await tag_repo.save(PostTag(post_id=tagged.id, created_by_user_id=moderator.id))

        # Act
        page = await post_service.list_posts(tags="Misleading or False Information")

        # Assert
        assert [p.id for p in page.items] == [tagged.id]
        assert page.items[0].is_tagged

    @pytest.mark.asyncio
    async def test_invalid_arguments_are_collected(self, unit_env):
        """Bad paging, sort and date range are reported together."""
        # Arrange
        post_service = await unit_env.get(PostService)
        now = datetime.now(timezone.utc)

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await post_service.list_posts(
                page=0,
                page_size=101,
                date_from=now,
                date_to=now - timedelta(days=1),
                sort_by="popularity",
                sort_order="sideways",
            )

        # Assert
        errors = exc_info.value.errors
        assert "Page must be greater than 0" in errors
        assert "Page size must be between 1 and 100" in errors
        assert "Date from cannot be later than date to" in errors
        assert "Invalid sort field 'popularity'. Use 'date' or 'likeCount'" in errors
        assert "Invalid sort order 'sideways'. Use 'asc' or 'desc'" in errors
