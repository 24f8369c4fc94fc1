"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # User ID
    username: str
    email: str
    role: str
    iss: str
    aud: str
    iat: datetime
    nbf: datetime
    exp: datetime
    jti: str

    @property
    def user_id(self) -> int:
        return int(self.sub)


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: int,
    username: str,
    email: str,
    role: str,
    settings: AuthSettings,
    now: datetime | None = None,
) -> tuple[str, datetime]:
    """Create a signed access token for the user.

    Args:
        user_id: User ID
        username: Username
        email: Email address
        role: Role name
        settings: Authentication settings
        now: Issue time (defaults to the current UTC time)

    Returns:
        Encoded JWT token and its expiry time
    """
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(minutes=settings.access_token_expiry_minutes)

    payload = {
        "sub": str(user_id),
        "username": username,
        "email": email,
        "role": role,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": issued_at,
        "nbf": issued_at,
        "exp": expiry,
        "jti": uuid4().hex,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token, expiry


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Signature, expiry, not-before, issuer and audience are all checked with
    no clock leeway.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            leeway=0,
            options={"require": ["exp", "iat", "nbf", "sub", "iss", "aud", "jti"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        # Well-signed token whose claims do not fit the payload model
        raise JWTError("Invalid token claims")
