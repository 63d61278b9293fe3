"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - UserRole: Role claim values (User, Manager, Admin)
    - SortDirection: Listing order (ASC, DESC)
    - RestaurantSortColumn: Columns allowed in ``sortBy``
"""

from src.domain.enums.restaurant_sort_column import RestaurantSortColumn
from src.domain.enums.sort_direction import SortDirection
from src.domain.enums.user_role import UserRole

__all__ = [
    "RestaurantSortColumn",
    "SortDirection",
    "UserRole",
]
