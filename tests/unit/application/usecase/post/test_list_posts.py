"""Unit tests for post use cases."""

import pytest

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from forum.domain.error import ValidationError
from forum.domain.repository import UserRepository
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_created_post_is_listed(self, unit_env):
        """A created post appears in the listing with its counts."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        create_post = await unit_env.get(CreatePostUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)
        author = await make_user(user_repo)
        created = await create_post.execute(
            CreatePostRequest(
                title="First post",
                content="Hello from the forum",
                author_id=author.id,
            )
        )

        # Act
        response = await list_posts.execute(ListPostsRequest())

        # Assert
        assert response.total_count == 1
        assert response.total_pages == 1
        item = response.items[0]
        assert item.id == created.id
        assert item.author_username == "alice"
        assert item.like_count == 0
        assert item.is_tagged is False

    @pytest.mark.asyncio
    async def test_invalid_sort_is_rejected(self, unit_env):
        """Unknown sort fields reach the domain check."""
        # Arrange
        list_posts = await unit_env.get(ListPostsUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="Invalid sort field"):
            await list_posts.execute(ListPostsRequest(sort_by="hotness"))
