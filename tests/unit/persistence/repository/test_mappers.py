"""Unit tests for row/model mappers."""

from datetime import datetime, timezone

from forum.domain.model import User
from forum.domain.value import TagKind, UserRole
from forum.persistence.mappers import (
    row_to_post_view,
    row_to_tagged_post,
    row_to_user,
    user_to_dict,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestUserMapping:
    """Tests for user mappers."""

    def test_user_round_trip(self):
        """Insert dict omits the ID and stores the role by name."""
        user = User(
            username="alice",
            email="alice@example.com",
            password_hash="hash",
            role=UserRole.MODERATOR,
            created_at=NOW,
        )

        data = user_to_dict(user)
        restored = row_to_user({**data, "id": 3})

        assert "id" not in data
        assert data["role"] == "Moderator"
        assert restored == user.model_copy(update={"id": 3})


class TestPostViewMapping:
    """Tests for row_to_post_view."""

    def test_counts_default_to_zero(self):
        """NULL counts read as zero and tag_count drives is_tagged."""
        row = {
            "id": 1,
            "title": "Hello world",
            "content": "Some content here",
            "author_id": 2,
            "author_username": "alice",
            "created_at": NOW,
            "comment_count": None,
            "like_count": 4,
            "tag_count": 1,
        }

        view = row_to_post_view(row)

        assert view.comment_count == 0
        assert view.like_count == 4
        assert view.is_tagged


class TestTaggedPostMapping:
    """Tests for row_to_tagged_post."""

    def test_joined_row(self):
        """Joined author and moderator columns are mapped."""
        row = {
            "post_id": 1,
            "tag": "misleading or false information",
            "created_by_user_id": 9,
            "tagged_at": NOW,
            "title": "Hello world",
            "content": "Some content here",
            "author_id": 2,
            "created_at": NOW,
            "author_username": "alice",
            "tagged_by_username": "mod_bob",
        }

        tagged = row_to_tagged_post(row)

        assert tagged.id == 1
        assert tagged.tag == TagKind.MISLEADING_INFORMATION
        assert tagged.tagged_by_user_id == 9
        assert tagged.tagged_by_username == "mod_bob"
