"""API tests for system endpoints, weather, tracing and unhandled errors."""

import random

import pytest
from fastapi.testclient import TestClient

from src.application.queries.handlers.get_weather_forecast_handler import (
    GetWeatherForecastHandler,
)
from src.core.container import get_get_restaurant_handler, get_weather_forecast_handler
from src.main import app
from src.presentation.routers.api.errors.exception_handlers import (
    UNHANDLED_ERROR_DETAIL,
)
from src.presentation.routers.api.middleware.trace_middleware import TRACE_HEADER


class ExplodingHandler:
    async def handle(self, query):
        raise RuntimeError("database password is hunter2")


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestSystemEndpoints:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_unknown_route_is_problem_details(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["status"] == 404


@pytest.mark.api
class TestTracing:
    def test_trace_header_is_echoed(self, client):
        response = client.get("/health", headers={TRACE_HEADER: "trace-123"})

        assert response.headers[TRACE_HEADER] == "trace-123"

    def test_trace_header_generated(self, client):
        response = client.get("/health")

        assert response.headers[TRACE_HEADER]


@pytest.mark.api
class TestWeatherForecast:
    def test_forecast(self, client):
        app.dependency_overrides[get_weather_forecast_handler] = lambda: (
            GetWeatherForecastHandler(rng=random.Random(3))
        )
        try:
            response = client.get("/api/weatherforecast", params={"count": 3})
        finally:
            app.dependency_overrides.pop(get_weather_forecast_handler)

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 3
        for day in body:
            assert -20 <= day["temperature_c"] < 55
            assert day["temperature_f"] == 32 + int(day["temperature_c"] / 0.5556)

    def test_inverted_range_is_400(self, client):
        response = client.get(
            "/api/weatherforecast",
            params={"minTemperature": 30, "maxTemperature": 10},
        )

        assert response.status_code == 400


@pytest.mark.api
class TestUnhandledErrors:
    def test_unhandled_exception_is_generic_500(self, client):
        app.dependency_overrides[get_get_restaurant_handler] = ExplodingHandler
        try:
            response = client.get(
                "/api/restaurant/0190f5a0-0000-7000-8000-000000000000"
            )
        finally:
            app.dependency_overrides.pop(get_get_restaurant_handler)

        assert response.status_code == 500
        body = response.json()
        assert body["detail"] == UNHANDLED_ERROR_DETAIL == "Something went wrong.."
        assert "hunter2" not in response.text
