"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.dish import Dish
from src.domain.entities.restaurant import Restaurant
from src.domain.entities.user import User

__all__ = [
    "Dish",
    "Restaurant",
    "User",
]
