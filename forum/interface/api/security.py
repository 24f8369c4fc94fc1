"""Bearer token authentication for routes."""

from forum.domain.error import UnauthorizedError
from forum.domain.model import TokenIdentity
from forum.domain.service import AuthService


def bearer_token(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer`` header.

    Raises:
        UnauthorizedError: If the header is missing or not a bearer credential
    """
    if not authorization:
        raise UnauthorizedError("Authentication required")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedError("Authorization header must be 'Bearer <token>'")
    return token.strip()


async def authenticate(
    authorization: str | None, auth_service: AuthService
) -> TokenIdentity:
    """Resolve the caller's identity from the Authorization header.

    Args:
        authorization: Raw header value
        auth_service: Auth domain service

    Returns:
        Identity of a user that still exists

    Raises:
        UnauthorizedError: If the token is missing, invalid or expired
    """
    return await auth_service.validate_token(bearer_token(authorization))
