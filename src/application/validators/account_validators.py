"""Validation functions for account inputs.

Email uniqueness needs the user store and is checked by the registration
handler after these rules pass.
"""

from src.application.commands.auth_commands import RegisterUser
from src.core.constants import BCRYPT_MAX_PASSWORD_BYTES
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import (
    collect_errors,
    validate_email,
    validate_min_length,
    validate_not_empty,
)
from src.domain.enums import UserRole

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = BCRYPT_MAX_PASSWORD_BYTES


def _validate_password_bytes(password: str | None) -> Result[str | None, ValidationError]:
    if password is not None and len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PASSWORD,
                message=f"password must be at most {PASSWORD_MAX_BYTES} bytes",
                field="password",
            )
        )
    return Success(value=password)


def _validate_passwords_match(
    password: str | None, confirm_password: str | None
) -> Result[str | None, ValidationError]:
    if confirm_password != password:
        return Failure(
            error=ValidationError(
                code=ErrorCode.PASSWORD_MISMATCH,
                message="confirm_password must be equal to password",
                field="confirm_password",
            )
        )
    return Success(value=confirm_password)


def _validate_role(role: str) -> Result[str, ValidationError]:
    if not UserRole.is_valid(role):
        allowed = ",".join(UserRole.values())
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"role must be in [{allowed}]",
                field="role",
            )
        )
    return Success(value=role)


def validate_register_user(command: RegisterUser) -> list[ValidationError]:
    """Validate a registration request.

    Rules:
        - email present and well-formed
        - password at least 6 characters and at most 72 bytes
        - confirm_password equal to password
        - role one of the known roles
    """
    return collect_errors(
        validate_not_empty(command.email, "email"),
        validate_email(command.email, "email"),
        validate_min_length(command.password, PASSWORD_MIN_LENGTH, "password"),
        _validate_password_bytes(command.password),
        _validate_passwords_match(command.password, command.confirm_password),
        _validate_role(command.role),
    )
