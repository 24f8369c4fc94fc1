"""Authentication domain service.

Password-based registration and login with short-lived JWT access tokens
and opaque refresh tokens. Tokens are stateless: nothing about an issued
token is stored, so logout is purely a client-side action.
"""

from typing import Optional

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import ConflictError, UnauthorizedError, ValidationError
from forum.domain.model import AuthResult, TokenIdentity, User
from forum.domain.repository import UserRepository
from forum.domain.value import Email, UserRole, Username

from .base import Service
from .security_service import SecurityService

INVALID_CREDENTIALS = "Invalid username/email or password"
INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"


def password_violations(password: str) -> list[str]:
    """List every rule the candidate password breaks."""
    errors: list[str] = []
    if not 8 <= len(password) <= 100:
        errors.append("Password must be between 8 and 100 characters")
    if password != password.strip():
        errors.append("Password cannot have leading or trailing whitespace")
    return errors


class AuthService(Service):
    """Domain service for registration, login and token refresh."""

    def __init__(
        self, user_repository: UserRepository, security_service: SecurityService
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            security_service: Hashing and token primitives
        """
        self.user_repository = user_repository
        self.security_service = security_service

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        role: Optional[UserRole] = None,
    ) -> AuthResult:
        """Register a new user and sign them in.

        Args:
            username: Desired username
            email: Email address
            password: Plain-text password
            role: Role to assign (defaults to User)

        Returns:
            Tokens and the stored user

        Raises:
            ValidationError: If any input rule is broken (all are reported)
            ConflictError: If the email or username is already registered
        """
        with logfire.span("auth_service.register", username=username):
            errors = (
                Username.violations(username)
                + Email.violations(email)
                + password_violations(password)
            )
            if errors:
                logfire.warn("Registration rejected", errors=errors)
                raise ValidationError.from_errors(errors)

            normalized_username = username.strip()
            normalized_email = email.strip().lower()

            if await self.user_repository.find_by_email(normalized_email):
                logfire.warn("Registration with existing email")
                raise ConflictError("Email is already registered")

            if await self.user_repository.find_by_username(normalized_username):
                logfire.warn("Registration with existing username", username=username)
                raise ConflictError("Username is already taken")

            user = User(
                username=normalized_username,
                email=normalized_email,
                password_hash=self.security_service.hash_password(password),
                role=role or UserRole.USER,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race against a concurrent registration
                logfire.warn("Duplicate user on insert", username=normalized_username)
                raise ConflictError("Username or email is already registered")

            logfire.info(
                "User registered",
                user_id=saved.id,
                username=saved.username,
                role=saved.role.value,
            )
            return self._issue_tokens(saved)

    async def login(self, identifier: str, password: str) -> AuthResult:
        """Sign a user in with username or email and password.

        An identifier containing '@' is looked up as an email, anything else
        as a username. Both lookups ignore case.

        Raises:
            UnauthorizedError: If no user matches or the password is wrong
        """
        with logfire.span("auth_service.login"):
            if not identifier or not password:
                raise UnauthorizedError(INVALID_CREDENTIALS)

            candidate = identifier.strip()
            if "@" in candidate:
                user = await self.user_repository.find_by_email(candidate.lower())
            else:
                user = await self.user_repository.find_by_username(candidate)

            if not user or not self.security_service.verify_password(
                password, user.password_hash
            ):
                logfire.warn("Login failed")
                raise UnauthorizedError(INVALID_CREDENTIALS)

            logfire.info("User logged in", user_id=user.id)
            return self._issue_tokens(user)

    async def refresh_token(
        self, access_token: str, refresh_token: Optional[str] = None
    ) -> AuthResult:
        """Exchange a valid access token for a fresh token pair.

        Args:
            access_token: Current access token
            refresh_token: Refresh token issued alongside it, if the client has one

        Raises:
            UnauthorizedError: If either token is invalid or the user is gone
        """
        with logfire.span("auth_service.refresh_token"):
            if refresh_token is not None and not (
                self.security_service.is_valid_refresh_token(refresh_token)
            ):
                logfire.warn("Malformed refresh token")
                raise UnauthorizedError(INVALID_REFRESH_TOKEN)

            identity = self.security_service.identity_from_token(access_token)

            user = await self.user_repository.find_by_id(identity.user_id)
            if not user:
                logfire.warn("Refresh for unknown user", user_id=identity.user_id)
                raise UnauthorizedError("User not found")

            logfire.info("Tokens refreshed", user_id=user.id)
            return self._issue_tokens(user)

    async def validate_token(self, token: str) -> TokenIdentity:
        """Validate an access token and confirm its user still exists.

        Raises:
            UnauthorizedError: On a bad signature, expiry, issuer or audience,
                or when the user no longer exists
        """
        with logfire.span("auth_service.validate_token"):
            identity = self.security_service.identity_from_token(token)
            if not await self.user_repository.exists(identity.user_id):
                raise UnauthorizedError("User not found")
            return identity

    def _issue_tokens(self, user: User) -> AuthResult:
        access_token, expires_at = self.security_service.create_access_token(user)
        return AuthResult(
            access_token=access_token,
            refresh_token=self.security_service.create_refresh_token(),
            expires_in=self.security_service.token_lifetime_seconds,
            expires_at=expires_at,
            user=user,
        )
