"""Registration handler.

Flow:
1. Emit UserRegistrationAttempted event
2. Validate email/password/confirm_password/role
3. Check email uniqueness (a taken email is a validation failure on ``email``)
4. Hash password
5. Create and save User entity
6. Emit UserRegistrationSucceeded event
7. Return Success(user_id)

On failure:
- Emit UserRegistrationFailed event
- Return Failure(ApplicationError)

Nothing is persisted unless every check passed. The plaintext password is
never stored or logged.
"""

from typing import cast
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.application.errors import ApplicationError
from src.application.validators import validate_register_user
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import UserRole
from src.domain.events import (
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from src.domain.protocols import PasswordHashingProtocol, UserRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.validators import normalize_email, normalize_nationality


class RegistrationError:
    """Registration-specific errors."""

    EMAIL_TAKEN = "That email is taken"


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence
            password_service: Password hashing service
            event_bus: Event bus for publishing domain events
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._event_bus = event_bus

    async def handle(self, cmd: RegisterUser) -> Result[UUID, ApplicationError]:
        """Handle user registration command.

        Returns:
            Success(user_id) on successful registration
            Failure(ApplicationError) with field errors on invalid input or
            a taken email
        """
        raw_email = cmd.email or ""
        await self._event_bus.publish(UserRegistrationAttempted(email=raw_email))

        errors = validate_register_user(cmd)
        if errors:
            await self._event_bus.publish(
                UserRegistrationFailed(email=raw_email, reason="validation_failed")
            )
            return Failure(error=ApplicationError.validation_failed(errors))

        email = normalize_email(raw_email)

        if await self._user_repo.exists_by_email(email):
            await self._event_bus.publish(
                UserRegistrationFailed(email=email, reason="email_taken")
            )
            return Failure(
                error=ApplicationError.validation_failed(
                    [
                        ValidationError(
                            code=ErrorCode.EMAIL_ALREADY_EXISTS,
                            message=RegistrationError.EMAIL_TAKEN,
                            field="email",
                        )
                    ]
                )
            )

        password_hash = self._password_service.hash_password(cast(str, cmd.password))
        user = User(
            id=uuid7(),
            email=email,
            password_hash=password_hash,
            role=UserRole(cmd.role),
            date_of_birth=cmd.date_of_birth,
            nationality=normalize_nationality(cmd.nationality),
        )
        await self._user_repo.save(user)

        await self._event_bus.publish(
            UserRegistrationSucceeded(
                user_id=user.id,
                email=user.email,
                role=user.role.value,
            )
        )
        return Success(value=user.id)
