"""Domain errors package.

Usage:
    from src.domain.errors import AuthenticationError, RestaurantError
"""

from src.domain.errors.authentication_error import AuthenticationError
from src.domain.errors.restaurant_error import RestaurantError

__all__ = [
    "AuthenticationError",
    "RestaurantError",
]
