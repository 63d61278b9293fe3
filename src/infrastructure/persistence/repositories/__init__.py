"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.dish_repository import DishRepository
from src.infrastructure.persistence.repositories.restaurant_repository import (
    RestaurantRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "DishRepository",
    "RestaurantRepository",
    "UserRepository",
]
