"""Account commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Attributes:
        email: User's email address (normalized).
        password: Plain text password (hashed by the handler, never stored).
        confirm_password: Must equal ``password``.
        date_of_birth: Optional, used by the age policy.
        nationality: Optional, used by the nationality policy.
        role: Role name, one of ``User``, ``Manager``, ``Admin``.

    Example:
        >>> command = RegisterUser(
        ...     email="user@example.com",
        ...     password="password123",
        ...     confirm_password="password123",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str | None
    password: str | None
    confirm_password: str | None
    date_of_birth: date | None = None
    nationality: str | None = None
    role: str = "User"


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Verify credentials and issue an access token.

    Attributes:
        email: User's email address.
        password: Plain text password.
    """

    email: str
    password: str
