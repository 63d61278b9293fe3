"""Account resource handlers.

Handlers:
    register_user  - Create a user with a hashed password
    login_user     - Verify credentials and issue a bearer token
    check_policy   - Evaluate a named requirement policy for the caller
"""

from typing import Annotated

from fastapi import Depends, Path, Request, Response

from src.application.commands import LoginUser, RegisterUser
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.queries import CheckPolicy
from src.application.queries.handlers.check_policy_handler import CheckPolicyHandler
from src.core.container import (
    get_check_policy_handler,
    get_login_user_handler,
    get_register_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.account_schemas import (
    LoginRequest,
    LoginResponse,
    PolicyCheckResponse,
    RegisterUserRequest,
    RegisterUserResponse,
)


async def register_user(
    request: Request,
    data: RegisterUserRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> RegisterUserResponse | Response:
    """Register a new user.

    POST /api/account/register → 200 OK

    Every failing field (missing email, short password, mismatched
    confirmation, taken email) is reported in one 400 response.

    Args:
        request: FastAPI request object.
        data: Registration data.
        handler: Registration handler (injected).

    Returns:
        RegisterUserResponse on success.
        Problem Details 400 on validation failure.
    """
    command = RegisterUser(
        email=data.email,
        password=data.password,
        confirm_password=data.confirm_password,
        date_of_birth=data.date_of_birth,
        nationality=data.nationality,
        role=data.role,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=user_id):
            return RegisterUserResponse(id=user_id, email=data.email or "")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


async def login_user(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> LoginResponse | Response:
    """Authenticate and issue an access token.

    POST /api/account/login → 200 OK

    Unknown email and wrong password produce the same 401 response.
    """
    result = await handler.handle(LoginUser(email=data.email, password=data.password))

    match result:
        case Success(value=tokens):
            return LoginResponse(
                access_token=tokens.access_token,
                token_type=tokens.token_type,
                expires_in=tokens.expires_in,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


async def check_policy(
    request: Request,
    principal: AuthenticatedUser,
    policy: Annotated[str, Path(description="Policy name, e.g. AtLeast20")],
    handler: CheckPolicyHandler = Depends(get_check_policy_handler),
) -> PolicyCheckResponse | Response:
    """Evaluate a named policy for the caller.

    GET /api/account/policies/{policy} → 200 OK

    Errors: 404 unknown policy, 403 not satisfied (no body).
    """
    result = await handler.handle(CheckPolicy(principal=principal, policy_name=policy))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return PolicyCheckResponse(policy=result.value)
