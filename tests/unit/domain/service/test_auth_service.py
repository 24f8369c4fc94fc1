"""Unit tests for AuthService."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from forum.config import AuthSettings
from forum.domain.error import ConflictError, UnauthorizedError, ValidationError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.service import AuthService, SecurityService
from forum.domain.value import UserRole
from forum.persistence.repository.inmemory import InMemoryStore, InMemoryUserRepository
from forum.util.jwt import create_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_creates_user_and_issues_tokens(self, unit_env):
        """Registering should store the user and return a token pair."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        security_service = await unit_env.get(SecurityService)

        # Act
        result = await auth_service.register("alice", "Alice@Example.com", "password123")

        # Assert
        assert result.user.id is not None
        assert result.user.username == "alice"
        assert result.user.email == "alice@example.com"
        assert result.user.role == UserRole.USER
        assert result.token_type == "Bearer"
        assert result.expires_in == 3600
        assert security_service.is_valid_refresh_token(result.refresh_token)
        identity = security_service.identity_from_token(result.access_token)
        assert identity.user_id == result.user.id

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """The stored hash should verify against the original password."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        security_service = await unit_env.get(SecurityService)

        # Act
        result = await auth_service.register("alice", "alice@example.com", "password123")

        # Assert
        assert result.user.password_hash != "password123"
        assert security_service.verify_password("password123", result.user.password_hash)

    @pytest.mark.asyncio
    async def test_register_with_moderator_role(self, unit_env):
        """An explicit role should be kept."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act
        result = await auth_service.register(
            "mod_bob", "bob@example.com", "password123", role=UserRole.MODERATOR
        )

        # Assert
        assert result.user.role == UserRole.MODERATOR
        assert result.user.is_moderator

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises_conflict(self, unit_env):
        """Duplicate email should fail and create no second user."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        store = await unit_env.get(InMemoryStore)
        await auth_service.register("alice", "alice@example.com", "password123")

        # Act & Assert
        with pytest.raises(ConflictError, match="Email is already registered"):
            await auth_service.register("other", "ALICE@example.com", "password123")
        assert len(store.users) == 1

    @pytest.mark.asyncio
    async def test_register_duplicate_username_ignores_case(self, unit_env):
        """Usernames differing only in case should conflict."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "alice@example.com", "password123")

        # Act & Assert
        with pytest.raises(ConflictError, match="Username is already taken"):
            await auth_service.register("ALICE", "other@example.com", "password123")

    @pytest.mark.asyncio
    async def test_register_reports_every_violation(self, unit_env):
        """All broken rules should be reported together."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.register("a!", "not-an-email", "short")

        # Assert
        errors = exc_info.value.errors
        assert "Username must be between 3 and 50 characters" in errors
        assert "Username can only contain letters, numbers, and underscores" in errors
        assert "Invalid email format" in errors
        assert "Password must be between 8 and 100 characters" in errors

    @pytest.mark.asyncio
    async def test_register_rejects_padded_password(self, unit_env):
        """Passwords with surrounding whitespace are rejected."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act & Assert
        with pytest.raises(ValidationError, match="leading or trailing whitespace"):
            await auth_service.register("alice", "alice@example.com", " password123 ")

    @pytest.mark.asyncio
    async def test_register_insert_race_raises_conflict(self, unit_env):
        """A uniqueness violation at insert time maps to ConflictError."""

        class RacingUserRepository(InMemoryUserRepository):
            async def save(self, user: User) -> User:
                raise IntegrityError("Duplicate user", None, Exception())

        # Arrange
        auth_service = AuthService(
            user_repository=RacingUserRepository(InMemoryStore()),
            security_service=await unit_env.get(SecurityService),
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await auth_service.register("alice", "alice@example.com", "password123")


class TestLogin:
    """Tests for login method."""

    @pytest.mark.asyncio
    async def test_login_with_username(self, unit_env):
        """Login by username should ignore case."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "Alice", "alice@example.com", "password123"
        )

        # Act
        result = await auth_service.login("alice", "password123")

        # Assert
        assert result.user.id == registered.user.id

    @pytest.mark.asyncio
    async def test_login_with_email(self, unit_env):
        """An identifier containing '@' is looked up as an email."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "alice", "alice@example.com", "password123"
        )

        # Act
        result = await auth_service.login("ALICE@example.com", "password123")

        # Assert
        assert result.user.id == registered.user.id

    @pytest.mark.asyncio
    async def test_login_wrong_password_raises_unauthorized(self, unit_env):
        """Wrong password should fail with the generic message."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice", "alice@example.com", "password123")

        # Act & Assert
        with pytest.raises(UnauthorizedError, match="Invalid username/email or password"):
            await auth_service.login("alice", "wrong-password")

    @pytest.mark.asyncio
    async def test_login_unknown_user_raises_unauthorized(self, unit_env):
        """Unknown identifier should fail with the same generic message."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act & Assert
        with pytest.raises(UnauthorizedError, match="Invalid username/email or password"):
            await auth_service.login("nobody@example.com", "password123")


class TestRefreshToken:
    """Tests for refresh_token method."""

    @pytest.mark.asyncio
    async def test_refresh_issues_new_tokens(self, unit_env):
        """A valid access token should be exchanged for a new pair."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "alice", "alice@example.com", "password123"
        )

        # Act
        result = await auth_service.refresh_token(
            registered.access_token, registered.refresh_token
        )

        # Assert
        assert result.user.id == registered.user.id
        assert result.refresh_token != registered.refresh_token

    @pytest.mark.asyncio
    async def test_refresh_with_malformed_refresh_token(self, unit_env):
        """A refresh token that is not 64 base64 bytes is rejected."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "alice", "alice@example.com", "password123"
        )

        # Act & Assert
        with pytest.raises(UnauthorizedError, match="Invalid or expired refresh token"):
            await auth_service.refresh_token(registered.access_token, "bm90LWVub3VnaA==")

    @pytest.mark.asyncio
    async def test_refresh_with_expired_access_token(self, unit_env):
        """Refresh requires an unexpired access token."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        auth_settings = await unit_env.get(AuthSettings)
        registered = await auth_service.register(
            "alice", "alice@example.com", "password123"
        )
        expired, _ = create_token(
            user_id=registered.user.id,
            username="alice",
            email="alice@example.com",
            role="User",
            settings=auth_settings,
            now=datetime.now(timezone.utc) - timedelta(hours=2),
        )

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await auth_service.refresh_token(expired)


class TestValidateToken:
    """Tests for validate_token method."""

    @pytest.mark.asyncio
    async def test_validate_token_returns_identity(self, unit_env):
        """A valid token yields the user's identity."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "mod_bob", "bob@example.com", "password123", role=UserRole.MODERATOR
        )

        # Act
        identity = await auth_service.validate_token(registered.access_token)

        # Assert
        assert identity.user_id == registered.user.id
        assert identity.username == "mod_bob"
        assert identity.role == UserRole.MODERATOR

    @pytest.mark.asyncio
    async def test_validate_token_for_missing_user(self, unit_env):
        """A well-signed token for a user that does not exist is rejected."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        auth_settings = await unit_env.get(AuthSettings)
        token, _ = create_token(999, "ghost", "ghost@example.com", "User", auth_settings)

        # Act & Assert
        with pytest.raises(UnauthorizedError, match="User not found"):
            await auth_service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_token_with_wrong_audience(self, unit_env):
        """Tokens minted for another audience are rejected."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)
        auth_settings = await unit_env.get(AuthSettings)
        user = await user_repo.save(
            User(username="alice", email="alice@example.com", password_hash="x")
        )
        other = auth_settings.model_copy(update={"jwt_audience": "someone-else"})
        token, _ = create_token(user.id, "alice", "alice@example.com", "User", other)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await auth_service.validate_token(token)
