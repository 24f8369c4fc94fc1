"""Security primitives domain service."""

from datetime import datetime, timezone

import logfire

from forum.config import AuthSettings
from forum.domain.error import UnauthorizedError
from forum.domain.model import TokenIdentity, User
from forum.domain.value import UserId, UserRole
from forum.util.jwt import JWTError, TokenPayload, create_token, verify_token
from forum.util.password import (
    generate_refresh_token,
    hash_password,
    is_valid_refresh_token,
    verify_password,
)

from .base import Service


class SecurityService(Service):
    """Domain service for password hashing and token handling."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize security service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    @property
    def token_lifetime_seconds(self) -> int:
        return self.auth_settings.access_token_expiry_minutes * 60

    def hash_password(self, password: str) -> str:
        """Hash a password with the configured work factor."""
        with logfire.span("security_service.hash_password"):
            return hash_password(password, rounds=self.auth_settings.bcrypt_rounds)

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash."""
        with logfire.span("security_service.verify_password"):
            return verify_password(password, password_hash)

    def create_access_token(self, user: User) -> tuple[str, datetime]:
        """Create an access token for a stored user.

        Args:
            user: User with an assigned ID

        Returns:
            Token string and its expiry time
        """
        with logfire.span("security_service.create_access_token", user_id=user.id):
            if user.id is None:
                raise ValueError("Cannot issue a token for an unsaved user")
            token, expires_at = create_token(
                user_id=user.id,
                username=user.username,
                email=user.email,
                role=user.role.value,
                settings=self.auth_settings,
                now=datetime.now(timezone.utc),
            )
            logfire.info("Access token created", user_id=user.id)
            return token, expires_at

    def create_refresh_token(self) -> str:
        """Create an opaque refresh token."""
        return generate_refresh_token()

    def is_valid_refresh_token(self, token: str) -> bool:
        """Check that a refresh token is well-formed."""
        return is_valid_refresh_token(token)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an access token and return its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("security_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Access token rejected", error=str(e))
                raise
            logfire.debug("Access token verified", user_id=payload.sub)
            return payload

    def identity_from_token(self, token: str) -> TokenIdentity:
        """Validate a token and return the identity it carries.

        Raises:
            UnauthorizedError: If the token is missing, invalid or expired
        """
        if not token:
            raise UnauthorizedError("Token is required")
        try:
            payload = self.verify_token(token)
            return TokenIdentity(
                user_id=UserId(payload.user_id),
                username=payload.username,
                email=payload.email,
                role=UserRole.parse(payload.role),
            )
        except (JWTError, ValueError) as e:
            raise UnauthorizedError("Invalid or expired token") from e
