"""Password hashing and refresh token helpers."""

import base64
import binascii
import secrets

import bcrypt

REFRESH_TOKEN_BYTES = 64

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plain-text password
        rounds: bcrypt work factor

    Returns:
        bcrypt hash as text
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash.

    A malformed hash verifies as False.
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        return False


def generate_refresh_token() -> str:
    """Generate an opaque refresh token (64 random bytes, base64)."""
    return base64.b64encode(secrets.token_bytes(REFRESH_TOKEN_BYTES)).decode("ascii")


def is_valid_refresh_token(token: str) -> bool:
    """Check that a refresh token is well-formed.

    Refresh tokens are not stored; a token is accepted when it decodes to
    exactly 64 bytes.
    """
    if not token:
        return False
    try:
        raw = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError):
        return False
    return len(raw) == REFRESH_TOKEN_BYTES


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]
