"""Queries (CQRS read side) and their handlers."""

from src.application.queries.dish_queries import GetDish, ListDishes
from src.application.queries.policy_queries import CheckPolicy
from src.application.queries.restaurant_queries import GetRestaurant, ListRestaurants
from src.application.queries.weather_queries import GetWeatherForecast

__all__ = [
    "CheckPolicy",
    "GetDish",
    "GetRestaurant",
    "GetWeatherForecast",
    "ListDishes",
    "ListRestaurants",
]
