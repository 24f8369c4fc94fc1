"""Unit tests for UserService."""

from datetime import datetime, timedelta, timezone

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Comment, Like
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from forum.domain.service import UserService
from forum.domain.value import UserId, UserRole
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetProfile:
    """Tests for get_profile method."""

    @pytest.mark.asyncio
    async def test_profile_counts(self, unit_env):
        """Profile counts posts, comments and likes received."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        alice = await make_user(user_repo, username="alice")
        bob = await make_user(user_repo, username="bob", role=UserRole.MODERATOR)
        first = await make_post(post_repo, alice.id)
        await make_post(post_repo, alice.id)
        await comment_repo.save(
            Comment(post_id=first.id, author_id=bob.id, content="Nice post")
        )
        await like_repo.save(Like(post_id=first.id, user_id=bob.id))

        # Act
        alice_profile = await user_service.get_profile(alice.id)
        bob_profile = await user_service.get_profile(bob.id)

        # Assert
        assert alice_profile.post_count == 2
        assert alice_profile.comment_count == 0
        assert alice_profile.likes_received == 1
        assert bob_profile.post_count == 0
        assert bob_profile.comment_count == 1
        assert bob_profile.role == UserRole.MODERATOR

    @pytest.mark.asyncio
    async def test_profile_missing_user(self, unit_env):
        """Unknown user raises NotFoundError."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found: 999"):
            await user_service.get_profile(UserId(999))


class TestLookups:
    """Tests for lookup helpers."""

    @pytest.mark.asyncio
    async def test_lookups_ignore_case(self, unit_env):
        """Email and username lookups are case-insensitive."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, username="Alice")

        # Act & Assert
        assert (await user_service.get_by_email(" ALICE@example.com ")).id == alice.id
        assert (await user_service.get_by_username("alice")).id == alice.id
        assert await user_service.get_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_usernames_by_ids(self, unit_env):
        """Usernames are resolved in bulk, skipping unknown IDs."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, username="alice")
        bob = await make_user(user_repo, username="bob")

        # Act
        names = await user_service.usernames_by_ids([alice.id, bob.id, UserId(999)])

        # Assert
        assert names == {alice.id: "alice", bob.id: "bob"}
        assert await user_service.usernames_by_ids([]) == {}

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, unit_env):
        """get_by_id raises while find_by_id returns None."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        assert await user_service.find_by_id(UserId(999)) is None
        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(999))


class TestGetUserPosts:
    """Tests for get_user_posts method."""

    @pytest.mark.asyncio
    async def test_user_posts_newest_first(self, unit_env):
        """Only the user's posts are listed, newest first."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        alice = await make_user(user_repo, username="alice")
        bob = await make_user(user_repo, username="bob")
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        older = await make_post(post_repo, alice.id, created_at=start)
        newer = await make_post(post_repo, alice.id, created_at=start + timedelta(1))
        await make_post(post_repo, bob.id)

        # Act
        page = await user_service.get_user_posts(alice.id)
        oldest_first = await user_service.get_user_posts(alice.id, sort_order="oldest")

        # Assert
        assert [p.id for p in page.items] == [newer.id, older.id]
        assert [p.id for p in oldest_first.items] == [older.id, newer.id]
        assert page.total_count == 2

    @pytest.mark.asyncio
    async def test_user_posts_missing_user(self, unit_env):
        """Unknown user raises NotFoundError."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await user_service.get_user_posts(UserId(999))

    @pytest.mark.asyncio
    async def test_user_posts_page_size_limit(self, unit_env):
        """Page size above the maximum is rejected."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo)

        # Act & Assert
        with pytest.raises(ValidationError, match="Page size must be between 1 and 100"):
            await user_service.get_user_posts(alice.id, page_size=101)
