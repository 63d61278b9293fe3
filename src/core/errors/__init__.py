"""Shared error dataclasses carried inside ``Failure`` results.

Usage:
    from src.core.errors import NotFoundError, ValidationError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
