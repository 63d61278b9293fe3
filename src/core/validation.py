"""Field validation helpers.

Small building blocks used by the per-input validators
(``validate_restaurant_query``, ``validate_create_restaurant``, ...).
Each helper returns a Result so callers can collect every failing field
into a list of ValidationError (field/message pairs) instead of stopping at
the first one.

Usage:
    from src.core.validation import collect_errors, validate_max_length

    errors = collect_errors(
        validate_not_empty(dto.name, "name"),
        validate_max_length(dto.name, 25, "name"),
    )
    if errors:
        ...
"""

import re
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_not_empty(value: Any, field_name: str) -> Result[Any, ValidationError]:
    """Validate that a value is not empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field_name} cannot be empty",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_email(
    email: str | None, field_name: str = "email"
) -> Result[str | None, ValidationError]:
    """Validate email format. ``None`` is left to ``validate_not_empty``.

    Args:
        email: Email address to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with email if valid, Failure with ValidationError otherwise.
    """
    if email is None:
        return Success(value=email)
    if not EMAIL_PATTERN.match(email):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_EMAIL,
                message="Invalid email format",
                field=field_name,
            )
        )
    return Success(value=email)


def validate_min_length(
    value: str | None, min_length: int, field_name: str
) -> Result[str | None, ValidationError]:
    """Validate minimum string length.

    Args:
        value: String to validate.
        min_length: Minimum required length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is None or len(value) < min_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field_name} must be at least {min_length} characters",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_max_length(
    value: str | None, max_length: int, field_name: str
) -> Result[str | None, ValidationError]:
    """Validate maximum string length. ``None`` passes.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is not None and len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field_name} must be at most {max_length} characters",
                field=field_name,
            )
        )
    return Success(value=value)


def collect_errors(*results: Result[Any, ValidationError]) -> list[ValidationError]:
    """Gather the errors out of a sequence of validation results.

    Only the first failure per field is kept so a blank name does not also
    report a length violation.
    """
    errors: list[ValidationError] = []
    seen_fields: set[str | None] = set()
    for result in results:
        if isinstance(result, Failure) and result.error.field not in seen_fields:
            seen_fields.add(result.error.field)
            errors.append(result.error)
    return errors
