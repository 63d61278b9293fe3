"""Unit tests for LoginUserHandler.

Unknown email and wrong password must be indistinguishable to the caller;
only the server-side event records which one it was.
"""

from datetime import date
from unittest.mock import AsyncMock, Mock

import bcrypt
import pytest
from uuid_extensions import uuid7

from src.application.commands import LoginUser
from src.application.commands.handlers.login_user_handler import (
    UNKNOWN_USER_PASSWORD_HASH,
    LoginError,
    LoginUserHandler,
)
from src.application.dtos import AuthTokens
from src.application.errors import ApplicationErrorCode
from src.core.result import Failure, Success
from src.domain.entities import User
from src.domain.enums import UserRole
from src.domain.events import UserLoginFailed, UserLoginSucceeded


def _user() -> User:
    return User(
        id=uuid7(),
        email="user@example.com",
        password_hash="hashed",
        role=UserRole.MANAGER,
        date_of_birth=date(1990, 1, 1),
        nationality="Polish",
    )


def _handler(user: User | None, password_ok: bool = True, password_service=None):
    user_repo = AsyncMock()
    user_repo.find_by_email.return_value = user
    if password_service is None:
        password_service = Mock()
        password_service.verify_password.return_value = password_ok
    token_service = Mock()
    token_service.generate_access_token.return_value = "signed.jwt.token"
    token_service.expires_in_seconds = 1296000
    event_bus = AsyncMock()
    handler = LoginUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        token_service=token_service,
        event_bus=event_bus,
    )
    return handler, token_service, event_bus


@pytest.mark.unit
class TestLoginUserHandler:
    async def test_valid_credentials_issue_token(self):
        user = _user()
        handler, token_service, event_bus = _handler(user)

        result = await handler.handle(
            LoginUser(email=" USER@example.com", password="password123")
        )

        assert result == Success(
            value=AuthTokens(access_token="signed.jwt.token", expires_in=1296000)
        )
        token_service.generate_access_token.assert_called_once_with(
            user_id=user.id,
            email=user.email,
            roles=["Manager"],
            nationality="Polish",
            date_of_birth=date(1990, 1, 1),
        )
        assert isinstance(event_bus.publish.call_args.args[0], UserLoginSucceeded)

    async def test_unknown_email_and_wrong_password_fail_identically(self):
        unknown_handler, _, unknown_bus = _handler(None)
        wrong_handler, wrong_tokens, wrong_bus = _handler(_user(), password_ok=False)
        command = LoginUser(email="user@example.com", password="password123")

        unknown = await unknown_handler.handle(command)
        wrong = await wrong_handler.handle(command)

        assert isinstance(unknown, Failure)
        assert isinstance(wrong, Failure)
        assert unknown.error == wrong.error
        assert unknown.error.code == ApplicationErrorCode.UNAUTHORIZED
        wrong_tokens.generate_access_token.assert_not_called()

        unknown_event = unknown_bus.publish.call_args.args[0]
        wrong_event = wrong_bus.publish.call_args.args[0]
        assert isinstance(unknown_event, UserLoginFailed)
        assert unknown_event.reason == LoginError.USER_NOT_FOUND
        assert wrong_event.reason == LoginError.INVALID_PASSWORD

    async def test_unknown_email_still_runs_one_password_check(self):
        password_service = Mock()
        handler, _, _ = _handler(None, password_service=password_service)

        await handler.handle(LoginUser(email="ghost@example.com", password="secret1"))

        password_service.verify_password.assert_called_once_with(
            "secret1", UNKNOWN_USER_PASSWORD_HASH
        )

    def test_unknown_email_hash_is_a_well_formed_bcrypt_hash(self):
        # checkpw raises ValueError on a malformed salt
        assert bcrypt.checkpw(b"secret1", UNKNOWN_USER_PASSWORD_HASH.encode()) is False
