"""Unit tests for GetWeatherForecastHandler."""

import random
from datetime import date, timedelta

import pytest
from freezegun import freeze_time

from src.application.dtos import WeatherForecastResult
from src.application.errors import ApplicationErrorCode
from src.application.queries import GetWeatherForecast
from src.application.queries.handlers.get_weather_forecast_handler import (
    SUMMARIES,
    GetWeatherForecastHandler,
)
from src.core.result import Failure, Success


@pytest.mark.unit
class TestGetWeatherForecastHandler:
    @freeze_time("2026-10-19")
    async def test_forecast_starts_tomorrow(self):
        handler = GetWeatherForecastHandler(rng=random.Random(42))

        result = await handler.handle(GetWeatherForecast(count=3))

        assert isinstance(result, Success)
        assert [f.date for f in result.value] == [
            date(2026, 10, 19) + timedelta(days=offset) for offset in (1, 2, 3)
        ]

    async def test_values_within_bounds(self):
        handler = GetWeatherForecastHandler(rng=random.Random(7))

        result = await handler.handle(
            GetWeatherForecast(count=50, min_temperature=0, max_temperature=10)
        )

        assert isinstance(result, Success)
        for forecast in result.value:
            assert 0 <= forecast.temperature_c < 10
            assert forecast.summary in SUMMARIES

    async def test_seeded_rng_is_deterministic(self):
        first = await GetWeatherForecastHandler(rng=random.Random(1)).handle(
            GetWeatherForecast()
        )
        second = await GetWeatherForecastHandler(rng=random.Random(1)).handle(
            GetWeatherForecast()
        )

        assert [f.temperature_c for f in first.value] == [
            f.temperature_c for f in second.value
        ]

    async def test_inverted_range_is_query_validation_failure(self):
        handler = GetWeatherForecastHandler()

        result = await handler.handle(
            GetWeatherForecast(min_temperature=30, max_temperature=10)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.QUERY_VALIDATION_FAILED

    def test_fahrenheit_conversion(self):
        forecast = WeatherForecastResult(date=date(2026, 1, 1), temperature_c=0, summary="Cool")

        assert forecast.temperature_f == 32
