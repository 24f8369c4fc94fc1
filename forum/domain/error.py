"""Domain layer errors.

Every error carries a stable ``tag`` that the interface layer puts in the
response body, so clients can branch on the failure kind without parsing
messages.
"""

from typing import ClassVar


class DomainError(Exception):
    """Base domain error."""

    tag: ClassVar[str] = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Input failed one or more validation rules.

    All violated rules are collected in ``errors`` rather than reporting
    only the first one.
    """

    tag = "invalid_argument"

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or [message]
        super().__init__(message)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationError":
        """Build a single error from a list of violations."""
        return cls("; ".join(errors), errors=list(errors))


class InvalidOperationError(DomainError):
    """Operation is well-formed but violates a business rule."""

    tag = "invalid_operation"


class UnauthorizedError(DomainError):
    """Missing, invalid or expired credential."""

    tag = "unauthorized"


class ForbiddenError(DomainError):
    """Authenticated but lacking the required role."""

    tag = "forbidden"


class ConflictError(DomainError):
    """Uniqueness violation."""

    tag = "conflict"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    tag = "not_found"

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
