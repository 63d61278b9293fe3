"""Authentication DTOs (Data Transfer Objects).

DTOs:
    - Principal: the authenticated caller, passed explicitly to handlers
    - AuthTokens: result of the LoginUser command
"""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class Principal:
    """Authenticated caller, built from the access token claims.

    Attributes:
        user_id: User's unique identifier (``sub`` claim).
        email: User's email address.
        roles: Role claims (``User``, ``Manager``, ``Admin``).
        nationality: Optional nationality claim.
        date_of_birth: Optional date of birth claim.
    """

    user_id: UUID
    email: str
    roles: list[str] = field(default_factory=list)
    nationality: str | None = None
    date_of_birth: date | None = None

    @property
    def is_admin(self) -> bool:
        return UserRole.ADMIN.value in self.roles

    def has_role(self, role: UserRole) -> bool:
        return role.value in self.roles


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Response from successful login.

    Attributes:
        access_token: Signed JWT access token.
        token_type: Token type (always "bearer").
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    token_type: str = "bearer"
    expires_in: int = 15 * 24 * 3600
