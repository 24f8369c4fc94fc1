"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules shared by services and request models.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class UserRole(str, Enum):
    """Role of a forum user."""

    USER = "User"
    MODERATOR = "Moderator"

    @classmethod
    def parse(cls, value: "str | int | UserRole") -> "UserRole":
        """Parse a role from its name (any case) or its ordinal.

        Accepts "User"/"Moderator" case-insensitively, or 0/1.

        Raises:
            ValueError: If the value names no role
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid role: {value!r}")
        if isinstance(value, int):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f"Invalid role: {value}")
        if isinstance(value, str):
            candidate = value.strip()
            if candidate.isdigit():
                return cls.parse(int(candidate))
            for member in cls:
                if member.value.lower() == candidate.lower():
                    return member
        raise ValueError(f"Invalid role: {value!r}")


class TagKind(str, Enum):
    """Moderation tags a moderator can attach to a post.

    Closed vocabulary: new kinds are added here, never as free-form strings.
    """

    MISLEADING_INFORMATION = "misleading or false information"


class PostSortField(str, Enum):
    """Fields post listings can be sorted by."""

    DATE = "date"
    LIKE_COUNT = "likecount"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class Username(RootValueObject[str]):
    """Username: 3-50 letters, digits or underscores."""

    @staticmethod
    def violations(value: str) -> list[str]:
        """List every rule the candidate username breaks."""
        errors: list[str] = []
        if value != value.strip():
            errors.append("Username cannot have leading or trailing whitespace")
        if not 3 <= len(value) <= 50:
            errors.append("Username must be between 3 and 50 characters")
        if value and not USERNAME_PATTERN.match(value):
            errors.append(
                "Username can only contain letters, numbers, and underscores"
            )
        return errors

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        errors = cls.violations(v)
        if errors:
            raise ValueError("; ".join(errors))
        return v


class Email(RootValueObject[str]):
    """Email address, stored lower-cased."""

    @staticmethod
    def violations(value: str) -> list[str]:
        """List every rule the candidate email breaks."""
        errors: list[str] = []
        if value != value.strip():
            errors.append("Email cannot have leading or trailing whitespace")
        candidate = value.strip()
        if not candidate:
            errors.append("Email is required")
            return errors
        if len(candidate) > 100:
            errors.append("Email cannot exceed 100 characters")
        if not _is_valid_email(candidate):
            errors.append("Invalid email format")
        return errors

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format and normalise case."""
        errors = cls.violations(v)
        if errors:
            raise ValueError("; ".join(errors))
        return v.lower()


def _is_valid_email(value: str) -> bool:
    if value.count("@") != 1:
        return False
    if value[0] in ".@" or value[-1] in ".@":
        return False
    if ".." in value:
        return False
    local, domain = value.split("@")
    if not local or not domain:
        return False
    if "." not in domain or domain.startswith(".") or domain.endswith("."):
        return False
    return not any(ch.isspace() for ch in value)
