"""Commands (CQRS write side) and their handlers."""

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.dish_commands import CreateDish, DeleteDishes
from src.application.commands.restaurant_commands import (
    CreateRestaurant,
    DeleteRestaurant,
    UpdateRestaurant,
)

__all__ = [
    "CreateDish",
    "CreateRestaurant",
    "DeleteDishes",
    "DeleteRestaurant",
    "LoginUser",
    "RegisterUser",
    "UpdateRestaurant",
]
