"""SQLAlchemy models.

Importing this package registers every table on ``BaseModel.metadata``
(needed by Alembic autogenerate and relationship string resolution).
"""

from src.infrastructure.persistence.models.dish import Dish
from src.infrastructure.persistence.models.restaurant import Address, Restaurant
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Address",
    "Dish",
    "Restaurant",
    "User",
]
