"""User roles carried as a claim on the access token.

Role Hierarchy:
    Admin > Manager > User

    - Admin: may modify any restaurant regardless of who created it
    - Manager: restaurant owner, may modify restaurants it created
    - User: default role for self-registered accounts

Usage:
    from src.domain.enums import UserRole

    if UserRole.ADMIN.value in current_user.roles:
        # Admin bypass for ownership checks
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for claims-based authorization.

    String Enum:
        Inherits from str for easy serialization into JWT claims.
        Values are capitalised to match the role names exposed by the API.
    """

    USER = "User"
    """Default role for registered users."""

    MANAGER = "Manager"
    """Restaurant manager role."""

    ADMIN = "Admin"
    """Administrator role. Bypasses restaurant ownership checks."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['User', 'Manager', 'Admin'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
