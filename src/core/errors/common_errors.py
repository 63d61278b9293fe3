"""Common error classes used across all domains and layers.

Error Types:
- ValidationError: Input validation failures (one field/message pair)
- NotFoundError: Resource not found (restaurant, dish, user, policy)
- AuthenticationError: Authentication failures
- AuthorizationError: Authorization failures (not owner, policy unmet)

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_PAGE_SIZE,
        message="PageSize must in [5,10,15]",
        field="pageSize",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Restaurant, Dish, ...).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, token expired)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (not the owner, policy not satisfied).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission or policy that was required.
        details: Additional context.
    """

    required_permission: str | None = None
