"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email
        exists_by_email: Duplicate check used by registration
        save: Create new user

    Example Implementation:
        >>> class UserRepository:
        ...     async def find_by_email(self, email: str) -> User | None:
        ...         # Database logic here
        ...         pass
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Email comparison should be case-insensitive.

        Args:
            email: User's email address (case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if user with email exists.

        Args:
            email: Email address to check (case-insensitive).

        Returns:
            True if user exists, False otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: User entity to persist.
        """
        ...
