"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import RestaurantCreateRequest, RestaurantListResponse
"""

from src.schemas.account_schemas import (
    LoginRequest,
    LoginResponse,
    PolicyCheckResponse,
    RegisterUserRequest,
    RegisterUserResponse,
)
from src.schemas.restaurant_schemas import (
    DishCreateRequest,
    DishResponse,
    RestaurantCreateRequest,
    RestaurantListResponse,
    RestaurantResponse,
    RestaurantUpdateRequest,
)
from src.schemas.weather_schemas import WeatherForecastResponse

__all__ = [
    # Account
    "LoginRequest",
    "LoginResponse",
    "PolicyCheckResponse",
    "RegisterUserRequest",
    "RegisterUserResponse",
    # Restaurant / dish
    "DishCreateRequest",
    "DishResponse",
    "RestaurantCreateRequest",
    "RestaurantListResponse",
    "RestaurantResponse",
    "RestaurantUpdateRequest",
    # Weather
    "WeatherForecastResponse",
]
