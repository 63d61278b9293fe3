"""Domain protocols (ports).

Structural interfaces implemented by the infrastructure layer.
"""

from src.domain.protocols.dish_repository import DishRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.restaurant_repository import RestaurantRepository
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "DishRepository",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RestaurantRepository",
    "TokenGenerationProtocol",
    "UserRepository",
]
