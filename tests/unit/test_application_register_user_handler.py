"""Unit tests for RegisterUserHandler.

Tests cover:
- Successful registration (hashing, persistence, claims)
- Field validation before any store access
- Duplicate email reported as a field validation failure
- Event publishing (ATTEMPTED, SUCCEEDED, FAILED)
"""

from datetime import date
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import pytest

from src.application.commands import RegisterUser
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
    RegistrationError,
)
from src.application.errors import ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.events import (
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)


def _handler(email_taken: bool = False):
    user_repo = AsyncMock()
    user_repo.exists_by_email.return_value = email_taken
    password_service = Mock()
    password_service.hash_password.return_value = "hashed_password"
    event_bus = AsyncMock()
    handler = RegisterUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        event_bus=event_bus,
    )
    return handler, user_repo, password_service, event_bus


def _command(**overrides) -> RegisterUser:
    data = {
        "email": "User@Example.com",
        "password": "password123",
        "confirm_password": "password123",
    }
    data.update(overrides)
    return RegisterUser(**data)


def _published(event_bus: AsyncMock) -> list:
    return [call.args[0] for call in event_bus.publish.call_args_list]


@pytest.mark.unit
class TestRegisterUserHandlerSuccess:
    async def test_register_returns_user_id(self):
        handler, _, _, _ = _handler()

        result = await handler.handle(_command())

        assert isinstance(result, Success)
        assert isinstance(result.value, UUID)

    async def test_register_stores_hash_never_plaintext(self):
        handler, user_repo, password_service, _ = _handler()

        await handler.handle(_command())

        password_service.hash_password.assert_called_once_with("password123")
        user = user_repo.save.call_args.args[0]
        assert user.password_hash == "hashed_password"
        assert "password123" not in repr(user)

    async def test_register_normalizes_email_and_keeps_claims(self):
        handler, user_repo, _, _ = _handler()

        await handler.handle(
            _command(
                date_of_birth=date(1990, 5, 17),
                nationality="german",
                role="Manager",
            )
        )

        user = user_repo.save.call_args.args[0]
        assert user.email == "user@example.com"
        assert user.date_of_birth == date(1990, 5, 17)
        assert user.nationality == "German"
        assert user.role == UserRole.MANAGER

    async def test_register_publishes_attempted_then_succeeded(self):
        handler, _, _, event_bus = _handler()

        result = await handler.handle(_command())

        events = _published(event_bus)
        assert isinstance(events[0], UserRegistrationAttempted)
        assert isinstance(events[1], UserRegistrationSucceeded)
        assert events[1].user_id == result.value
        assert events[1].role == "User"


@pytest.mark.unit
class TestRegisterUserHandlerFailure:
    async def test_duplicate_email_is_validation_failure(self):
        handler, user_repo, password_service, event_bus = _handler(email_taken=True)

        result = await handler.handle(_command())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        field_error = result.error.field_errors[0]
        assert field_error.field == "email"
        assert field_error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert field_error.message == RegistrationError.EMAIL_TAKEN
        user_repo.exists_by_email.assert_awaited_once_with("user@example.com")
        user_repo.save.assert_not_called()
        password_service.hash_password.assert_not_called()
        failed = _published(event_bus)[-1]
        assert isinstance(failed, UserRegistrationFailed)
        assert failed.reason == "email_taken"

    async def test_password_mismatch_rejected_before_store_access(self):
        handler, user_repo, _, event_bus = _handler()

        result = await handler.handle(_command(confirm_password="password124"))

        assert isinstance(result, Failure)
        assert [e.field for e in result.error.field_errors] == ["confirm_password"]
        user_repo.exists_by_email.assert_not_called()
        user_repo.save.assert_not_called()
        assert _published(event_bus)[-1].reason == "validation_failed"

    async def test_missing_email_rejected(self):
        handler, user_repo, _, _ = _handler()

        result = await handler.handle(_command(email=None))

        assert isinstance(result, Failure)
        assert result.error.field_errors[0].field == "email"
        user_repo.save.assert_not_called()
