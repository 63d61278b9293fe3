"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Claims:
    Role, nationality and date of birth are copied into the access token so
    that requirement policies (minimum age, nationality) can be evaluated
    without a database lookup.
"""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from src.domain.enums.user_role import UserRole


@dataclass
class User:
    """User domain entity.

    Attributes:
        id: Unique user identifier
        email: User email address (unique)
        password_hash: Bcrypt hashed password (never plaintext)
        role: Role claim (User, Manager, Admin)
        date_of_birth: Optional date of birth (used by age policies)
        nationality: Optional nationality (used by nationality policies)
        created_at: Timestamp when user was created

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="user@example.com",
        ...     password_hash="$2b$12$...",
        ...     role=UserRole.USER,
        ... )
        >>> user.is_admin()
        False
    """

    id: UUID
    email: str
    password_hash: str  # Never store plaintext passwords
    role: UserRole = UserRole.USER
    date_of_birth: date | None = None
    nationality: str | None = None
    created_at: datetime | None = None

    def is_admin(self) -> bool:
        """Check if user holds the administrative role."""
        return self.role == UserRole.ADMIN
