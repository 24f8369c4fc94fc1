"""Unit tests for moderation use cases."""

import pytest

from forum.application.usecase.moderation import (
    GetHistoryRequest,
    GetHistoryUseCase,
    ListTaggedPostsRequest,
    ListTaggedPostsUseCase,
    TagPostRequest,
    TagPostUseCase,
)
from forum.domain.error import ForbiddenError
from forum.domain.repository import PostRepository, UserRepository
from forum.domain.value import UserRole
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    author = await make_user(user_repo, username="alice")
    moderator = await make_user(user_repo, username="mod_bob", role=UserRole.MODERATOR)
    post = await make_post(post_repo, author.id)
    return post, author, moderator


class TestListTaggedPostsUseCase:
    """Tests for ListTaggedPostsUseCase."""

    @pytest.mark.asyncio
    async def test_moderator_sees_queue(self, unit_env):
        """Moderators get the paged tagged list."""
        # Arrange
        tag_post = await unit_env.get(TagPostUseCase)
        list_tagged = await unit_env.get(ListTaggedPostsUseCase)
        post, _, moderator = await _seed(unit_env)
        await tag_post.execute(TagPostRequest(post_id=post.id, moderator_id=moderator.id))

        # Act
        response = await list_tagged.execute(
            ListTaggedPostsRequest(moderator_id=moderator.id)
        )

        # Assert
        assert response.total_count == 1
        assert response.items[0].id == post.id
        assert response.items[0].tagged_by_username == "mod_bob"

    @pytest.mark.asyncio
    async def test_regular_user_is_forbidden(self, unit_env):
        """Users without the moderator role cannot see the queue."""
        # Arrange
        list_tagged = await unit_env.get(ListTaggedPostsUseCase)
        _, author, _ = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await list_tagged.execute(ListTaggedPostsRequest(moderator_id=author.id))


class TestGetHistoryUseCase:
    """Tests for GetHistoryUseCase."""

    @pytest.mark.asyncio
    async def test_history_names_moderator(self, unit_env):
        """History entries carry the tagging moderator's username."""
        # Arrange
        tag_post = await unit_env.get(TagPostUseCase)
        get_history = await unit_env.get(GetHistoryUseCase)
        post, _, moderator = await _seed(unit_env)
        await tag_post.execute(TagPostRequest(post_id=post.id, moderator_id=moderator.id))

        # Act
        response = await get_history.execute(
            GetHistoryRequest(post_id=post.id, moderator_id=moderator.id)
        )

        # Assert
        assert response.post_id == post.id
        assert [e.created_by_username for e in response.entries] == ["mod_bob"]

    @pytest.mark.asyncio
    async def test_history_forbidden_for_regular_user(self, unit_env):
        """Users without the moderator role cannot read history."""
        # Arrange
        get_history = await unit_env.get(GetHistoryUseCase)
        post, author, _ = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await get_history.execute(
                GetHistoryRequest(post_id=post.id, moderator_id=author.id)
            )
