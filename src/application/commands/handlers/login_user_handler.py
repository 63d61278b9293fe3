"""Login handler.

Flow:
1. Emit UserLoginAttempted event
2. Find user by email
3. Verify password against the stored bcrypt hash
4. Generate JWT access token with identity, role, nationality and date of
   birth claims
5. Emit UserLoginSucceeded event
6. Return Success(AuthTokens)

An unknown email and a wrong password produce the same failure; only the
UserLoginFailed event (server-side log) records which one it was. An unknown
email is still checked against a fixed bcrypt hash so both failures cost one
bcrypt verification.
"""

from src.application.commands.auth_commands import LoginUser
from src.application.dtos.auth_dtos import AuthTokens
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError as AuthenticationDomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.events import UserLoginAttempted, UserLoginFailed, UserLoginSucceeded
from src.domain.protocols import (
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.validators import normalize_email


class LoginError:
    """Login failure reasons (server-side only)."""

    USER_NOT_FOUND = "user_not_found"
    INVALID_PASSWORD = "invalid_password"


# Checked when the email is unknown. Cost 12 matches the default bcrypt_rounds.
UNKNOWN_USER_PASSWORD_HASH = (
    "$2a$12$R9h/cIPz0gi.URNNX3kh2OPST9/PgBkqquzi.Ss7KIUgO2t0jWMUW"
)

_INVALID_CREDENTIALS = ApplicationError(
    code=ApplicationErrorCode.UNAUTHORIZED,
    message=AuthenticationError.INVALID_CREDENTIALS,
    domain_error=AuthenticationDomainError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=AuthenticationError.INVALID_CREDENTIALS,
    ),
)


class LoginUserHandler:
    """Handler for user login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._event_bus = event_bus

    async def handle(self, cmd: LoginUser) -> Result[AuthTokens, ApplicationError]:
        """Handle user login command.

        Returns:
            Success(AuthTokens) on valid credentials.
            Failure(ApplicationError) UNAUTHORIZED otherwise.
        """
        email = normalize_email(cmd.email)
        await self._event_bus.publish(UserLoginAttempted(email=email))

        user = await self._user_repo.find_by_email(email)
        if user is None:
            self._password_service.verify_password(
                cmd.password, UNKNOWN_USER_PASSWORD_HASH
            )
            await self._event_bus.publish(
                UserLoginFailed(email=email, reason=LoginError.USER_NOT_FOUND)
            )
            return Failure(error=_INVALID_CREDENTIALS)

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            await self._event_bus.publish(
                UserLoginFailed(email=email, reason=LoginError.INVALID_PASSWORD)
            )
            return Failure(error=_INVALID_CREDENTIALS)

        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            roles=[user.role.value],
            nationality=user.nationality,
            date_of_birth=user.date_of_birth,
        )

        await self._event_bus.publish(UserLoginSucceeded(user_id=user.id, email=user.email))

        return Success(
            value=AuthTokens(
                access_token=access_token,
                expires_in=self._token_service.expires_in_seconds,
            )
        )
