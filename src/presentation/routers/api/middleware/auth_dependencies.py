"""JWT authentication dependencies.

FastAPI dependencies that turn the bearer token into a ``Principal``.
Restaurant and dish mutations require one; listing and single gets are
anonymous.

Usage:
    async def delete_restaurant(
        principal: AuthenticatedUser,
        ...
    ):
        command = DeleteRestaurant(principal=principal, restaurant_id=...)
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.application.dtos import Principal
from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# auto_error=False: a missing header is reported as 401 here, not by HTTPBearer
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _principal_from_claims(payload: dict) -> Principal:
    """Build a Principal from validated token claims.

    Raises:
        KeyError: If ``sub`` or ``email`` is missing.
        ValueError: If ``sub`` is not a UUID or ``date_of_birth`` not ISO.
    """
    roles_raw = payload.get("roles", [])
    roles = [str(role) for role in roles_raw] if isinstance(roles_raw, list) else []

    nationality_raw = payload.get("nationality")
    dob_raw = payload.get("date_of_birth")

    return Principal(
        user_id=UUID(str(payload["sub"])),
        email=str(payload["email"]),
        roles=roles,
        nationality=str(nationality_raw) if nationality_raw else None,
        date_of_birth=date.fromisoformat(str(dob_raw)) if dob_raw else None,
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> Principal:
    """Get the authenticated principal from the JWT access token.

    Args:
        credentials: Bearer token from Authorization header.
        token_service: JWT token service (injected).

    Returns:
        Principal with identity and claims from a valid token.

    Raises:
        HTTPException 401: If the token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    result = token_service.validate_access_token(credentials.credentials)

    match result:
        case Success(value=payload):
            try:
                return _principal_from_claims(payload)
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e

        case Failure(error=error):
            raise _unauthorized(error)

    raise _unauthorized("Invalid token")


# Type alias for authenticated principal dependency
AuthenticatedUser = Annotated[Principal, Depends(get_current_user)]
