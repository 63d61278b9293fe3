"""Weather forecast response schema."""

from datetime import date as date_type

from pydantic import BaseModel, Field

from src.application.dtos import WeatherForecastResult


class WeatherForecastResponse(BaseModel):
    """One day of forecast.

    GET /api/weatherforecast
    """

    date: date_type = Field(..., description="Forecast day")
    temperature_c: int = Field(..., description="Temperature in Celsius")
    temperature_f: int = Field(..., description="Temperature in Fahrenheit")
    summary: str = Field(..., description="Summary, e.g. Chilly")

    @classmethod
    def from_dto(cls, dto: WeatherForecastResult) -> "WeatherForecastResponse":
        return cls(
            date=dto.date,
            temperature_c=dto.temperature_c,
            temperature_f=dto.temperature_f,
            summary=dto.summary,
        )
