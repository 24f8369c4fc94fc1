"""Unit tests for LikeService."""

import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.error import InvalidOperationError, NotFoundError
from forum.domain.model import Like
from forum.domain.repository import PostRepository, UserRepository
from forum.domain.service import LikeService
from forum.domain.value import PostId, UserId
from forum.persistence.repository.inmemory import InMemoryLikeRepository, InMemoryStore
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    author = await make_user(user_repo, username="alice")
    fan = await make_user(user_repo, username="bob")
    post = await make_post(post_repo, author.id)
    return post, author, fan


class ConcurrentLikeRepository(InMemoryLikeRepository):
    """Simulates another request inserting the same like first."""

    async def save(self, like: Like) -> Like:
        await super().save(like)
        raise IntegrityError("Duplicate like", None, Exception())


class YieldingLikeRepository(InMemoryLikeRepository):
    """Hands control to other tasks after every existence check."""

    async def find_by_post_and_user(self, post_id: PostId, user_id: UserId):
        like = await super().find_by_post_and_user(post_id, user_id)
        await asyncio.sleep(0)
        return like


class TestToggle:
    """Tests for toggle method."""

    @pytest.mark.asyncio
    async def test_toggle_likes_then_unlikes(self, unit_env):
        """First toggle likes the post, second removes the like."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post, _, fan = await _seed(unit_env)

        # Act
        liked = await like_service.toggle(post.id, fan.id)
        unliked = await like_service.toggle(post.id, fan.id)

        # Assert
        assert liked.is_liked and liked.like_count == 1
        assert not unliked.is_liked and unliked.like_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("toggles", [1, 2, 3, 4, 5])
    async def test_toggle_parity(self, unit_env, toggles):
        """After N toggles the post is liked exactly when N is odd."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post, _, fan = await _seed(unit_env)

        # Act
        for _ in range(toggles):
            status = await like_service.toggle(post.id, fan.id)

        # Assert
        assert status.is_liked == (toggles % 2 == 1)
        assert await like_service.has_liked(post.id, fan.id) == (toggles % 2 == 1)
        assert await like_service.count_for_post(post.id) == toggles % 2

    @pytest.mark.asyncio
    async def test_self_like_is_rejected(self, unit_env):
        """Authors cannot like their own posts."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post, author, _ = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(InvalidOperationError, match="cannot like their own posts"):
            await like_service.toggle(post.id, author.id)
        assert await like_service.count_for_post(post.id) == 0

    @pytest.mark.asyncio
    async def test_toggle_missing_post(self, unit_env):
        """Liking an unknown post raises NotFoundError."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        _, _, fan = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await like_service.toggle(PostId(999), fan.id)

    @pytest.mark.asyncio
    async def test_concurrent_insert_reports_liked(self, unit_env):
        """A duplicate on insert means another request already liked the post."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        post, _, fan = await _seed(unit_env)
        like_service = LikeService(
            like_repository=ConcurrentLikeRepository(store),
            post_repository=await unit_env.get(PostRepository),
        )

        # Act
        status = await like_service.toggle(post.id, fan.id)

        # Assert
        assert status.is_liked
        assert status.like_count == 1

    @pytest.mark.asyncio
    async def test_parallel_toggles_never_duplicate(self, unit_env):
        """Two toggles that both see no like leave exactly one like."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        post, _, fan = await _seed(unit_env)
        like_service = LikeService(
            like_repository=YieldingLikeRepository(store),
            post_repository=await unit_env.get(PostRepository),
        )

        # Act
        results = await asyncio.gather(
            like_service.toggle(post.id, fan.id),
            like_service.toggle(post.id, fan.id),
        )

        # Assert
        assert [r.is_liked for r in results] == [True, True]
        assert len(store.likes) == 1
        assert await like_service.count_for_post(post.id) == 1


class TestUnlike:
    """Tests for unlike method."""

    @pytest.mark.asyncio
    async def test_unlike_removes_like(self, unit_env):
        """Unliking a liked post drops the count."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post, _, fan = await _seed(unit_env)
        await like_service.toggle(post.id, fan.id)

        # Act
        status = await like_service.unlike(post.id, fan.id)

        # Assert
        assert not status.is_liked
        assert status.like_count == 0

    @pytest.mark.asyncio
    async def test_unlike_without_like(self, unit_env):
        """Unliking a post the user never liked raises NotFoundError."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post, _, fan = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Like not found"):
            await like_service.unlike(post.id, fan.id)


class TestListLikes:
    """Tests for list_for_post method."""

    @pytest.mark.asyncio
    async def test_list_likes(self, unit_env):
        """Every like on the post is listed."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        user_repo = await unit_env.get(UserRepository)
        post, _, fan = await _seed(unit_env)
        other = await make_user(user_repo, username="carol")
        await like_service.toggle(post.id, fan.id)
        await like_service.toggle(post.id, other.id)

        # Act
        likes = await like_service.list_for_post(post.id)

        # Assert
        assert {like.user_id for like in likes} == {fan.id, other.id}

    @pytest.mark.asyncio
    async def test_list_likes_missing_post(self, unit_env):
        """Listing likes of an unknown post raises NotFoundError."""
        # Arrange
        like_service = await unit_env.get(LikeService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await like_service.list_for_post(PostId(999))
