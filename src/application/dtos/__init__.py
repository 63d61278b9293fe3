"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.

Categories:
    - auth_dtos: principal and login results
    - restaurant_dtos: restaurant, dish and paging read models
    - weather_dtos: weather forecast results

Note:
    DTOs are NOT API schemas (Pydantic models in ``src/schemas``).
"""

from src.application.dtos.auth_dtos import AuthTokens, Principal
from src.application.dtos.restaurant_dtos import (
    DishResult,
    PagedResult,
    RestaurantResult,
)
from src.application.dtos.weather_dtos import WeatherForecastResult

__all__ = [
    "AuthTokens",
    "DishResult",
    "PagedResult",
    "Principal",
    "RestaurantResult",
    "WeatherForecastResult",
]
