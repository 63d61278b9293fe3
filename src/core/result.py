"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Command and query handlers return a Result and the
presentation layer translates a Failure into an HTTP response.

Usage:
    def find_restaurant(restaurant_id: UUID) -> Result[Restaurant, str]:
        restaurant = store.get(restaurant_id)
        if restaurant is None:
            return Failure(error="Restaurant not found")
        return Success(value=restaurant)

    match find_restaurant(restaurant_id):
        case Success(value=restaurant):
            print(restaurant.name)
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
