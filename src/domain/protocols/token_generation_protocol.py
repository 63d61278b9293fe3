"""Token generation protocol for domain layer.

This protocol defines the interface for JWT access token generation and
validation. Infrastructure provides the concrete implementation (JWTService).

Token Strategy:
    - Access tokens only (no refresh tokens)
    - Lifetime configured in days
    - Issuer and audience bound to server configuration
    - Stateless validation (no database lookup)
"""

from datetime import date
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            roles=[user.role.value],
            nationality=user.nationality,
            date_of_birth=user.date_of_birth,
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = UUID(payload["sub"])
            case Failure(error=error):
                # Invalid, expired or foreign token
                pass
    """

    @property
    def expires_in_seconds(self) -> int:
        """Token lifetime in seconds (for the login response)."""
        ...

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        roles: list[str],
        nationality: str | None = None,
        date_of_birth: date | None = None,
    ) -> str:
        """Generate a signed access token embedding identity claims.

        Args:
            user_id: User's unique identifier (stored in 'sub' claim).
            email: User's email address ('email' and 'name' claims).
            roles: Role claim values (e.g. ["User"]).
            nationality: Optional nationality claim.
            date_of_birth: Optional date of birth claim (ISO format).

        Returns:
            JWT access token string (header.payload.signature).
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate an access token and extract its payload.

        Returns:
            Success with payload dict, or Failure with a reason string.
            Signature, expiry, issuer and audience are all checked.
        """
        ...
