"""Input validation functions returning field/message pairs."""

from src.application.validators.account_validators import validate_register_user
from src.application.validators.dish_validators import validate_create_dish
from src.application.validators.restaurant_validators import (
    validate_create_restaurant,
    validate_restaurant_query,
    validate_update_restaurant,
)
from src.application.validators.weather_validators import validate_weather_forecast

__all__ = [
    "validate_create_dish",
    "validate_create_restaurant",
    "validate_register_user",
    "validate_restaurant_query",
    "validate_update_restaurant",
    "validate_weather_forecast",
]
