"""Validation for the weather forecast query."""

from src.application.queries.weather_queries import GetWeatherForecast
from src.core.enums import ErrorCode
from src.core.errors import ValidationError

MAX_FORECAST_DAYS = 100


def validate_weather_forecast(query: GetWeatherForecast) -> list[ValidationError]:
    errors: list[ValidationError] = []
    if not 1 <= query.count <= MAX_FORECAST_DAYS:
        errors.append(
            ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"count must be between 1 and {MAX_FORECAST_DAYS}",
                field="count",
            )
        )
    if query.min_temperature >= query.max_temperature:
        errors.append(
            ValidationError(
                code=ErrorCode.INVALID_TEMPERATURE_RANGE,
                message="minTemperature must be lower than maxTemperature",
                field="minTemperature",
            )
        )
    return errors
