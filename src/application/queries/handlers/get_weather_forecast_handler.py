"""GetWeatherForecast query handler (demo endpoint)."""

import random
from datetime import date, timedelta

from src.application.dtos.weather_dtos import WeatherForecastResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.weather_queries import GetWeatherForecast
from src.application.validators import validate_weather_forecast
from src.core.result import Failure, Result, Success

SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)


class GetWeatherForecastHandler:
    """Generate random forecasts starting tomorrow.

    Args:
        rng: Random source; tests pass a seeded ``random.Random``.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    async def handle(
        self, query: GetWeatherForecast
    ) -> Result[list[WeatherForecastResult], ApplicationError]:
        errors = validate_weather_forecast(query)
        if errors:
            return Failure(
                error=ApplicationError.validation_failed(
                    errors, code=ApplicationErrorCode.QUERY_VALIDATION_FAILED
                )
            )

        today = date.today()
        return Success(
            value=[
                WeatherForecastResult(
                    date=today + timedelta(days=index),
                    temperature_c=self._rng.randrange(
                        query.min_temperature, query.max_temperature
                    ),
                    summary=self._rng.choice(SUMMARIES),
                )
                for index in range(1, query.count + 1)
            ]
        )
