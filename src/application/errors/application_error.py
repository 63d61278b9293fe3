"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (command/query execution failures).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import ValidationError
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Each code maps to exactly one HTTP status in the presentation layer.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Restaurant not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Wraps domain errors with application-specific context. Used by command and
    query handlers to provide structured error information to the presentation
    layer.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs
        field_errors: Every failing field of a validated input, in order

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.QUERY_VALIDATION_FAILED,
        ...     message="One or more validation errors occurred",
        ...     field_errors=[page_size_error],
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
    field_errors: list[ValidationError] | None = None

    @classmethod
    def validation_failed(
        cls,
        errors: list[ValidationError],
        *,
        code: ApplicationErrorCode = ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ) -> "ApplicationError":
        """Build a validation failure carrying every field error."""
        return cls(
            code=code,
            message="One or more validation errors occurred",
            domain_error=errors[0] if errors else None,
            field_errors=errors,
        )
