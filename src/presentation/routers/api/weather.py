"""Weather forecast demo handler."""

from typing import Annotated

from fastapi import Depends, Query, Request, Response

from src.application.queries import GetWeatherForecast
from src.application.queries.handlers.get_weather_forecast_handler import (
    GetWeatherForecastHandler,
)
from src.core.container import get_weather_forecast_handler
from src.core.result import Failure
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.weather_schemas import WeatherForecastResponse


async def get_weather_forecast(
    request: Request,
    count: Annotated[int, Query(description="Number of days (1-100)")] = 5,
    min_temperature: Annotated[
        int, Query(alias="minTemperature", description="Lower bound in Celsius")
    ] = -20,
    max_temperature: Annotated[
        int, Query(alias="maxTemperature", description="Upper bound (exclusive)")
    ] = 55,
    handler: GetWeatherForecastHandler = Depends(get_weather_forecast_handler),
) -> list[WeatherForecastResponse] | Response:
    """Random forecast for the next ``count`` days.

    GET /api/weatherforecast → 200 OK, 400 on an invalid range
    """
    query = GetWeatherForecast(
        count=count,
        min_temperature=min_temperature,
        max_temperature=max_temperature,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return [WeatherForecastResponse.from_dto(day) for day in result.value]
