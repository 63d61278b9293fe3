"""Weather forecast query."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetWeatherForecast:
    """Generate ``count`` days of random forecast.

    Attributes:
        count: Number of days (1..100).
        min_temperature: Lower bound in Celsius (inclusive).
        max_temperature: Upper bound in Celsius (exclusive, > min).
    """

    count: int = 5
    min_temperature: int = -20
    max_temperature: int = 55
