"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Issuer and audience bound to configuration (the issuer doubles as
      the audience)
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, date, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            roles=[user.role.value],
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        expiration_days: int = 15,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing (>= 32 bytes).
            issuer: Value of the ``iss`` and ``aud`` claims.
            expiration_days: Token lifetime in days.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._expiration = timedelta(days=expiration_days)
        self._algorithm = "HS256"

    @property
    def expires_in_seconds(self) -> int:
        return int(self._expiration.total_seconds())

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        roles: list[str],
        nationality: str | None = None,
        date_of_birth: date | None = None,
    ) -> str:
        """Generate JWT access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32, issuer="http://restaurantapi.com")
            >>> token = service.generate_access_token(
            ...     user_id=uuid7(),
            ...     email="user@example.com",
            ...     roles=["User"],
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)

        payload: dict[str, Any] = {
            "sub": str(user_id),  # Subject (user ID)
            "email": email,
            "name": email,
            "roles": roles,
            "iss": self._issuer,
            "aud": self._issuer,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expiration).timestamp()),
            "jti": str(uuid7()),
        }

        # Optional claims consumed by requirement policies
        if nationality is not None:
            payload["nationality"] = nationality
        if date_of_birth is not None:
            payload["date_of_birth"] = date_of_birth.isoformat()

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        Returns:
            Success with the payload, or Failure with EXPIRED_TOKEN for an
            expired token and INVALID_TOKEN for anything else (bad signature,
            wrong issuer or audience, malformed, missing claims).
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                audience=self._issuer,
                options={"require": ["sub", "exp", "iat"]},
            )
            return Success(value=payload)
        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)
