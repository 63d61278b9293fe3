"""Weather forecast DTOs."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, kw_only=True)
class WeatherForecastResult:
    """One day of forecast."""

    date: date
    temperature_c: int
    summary: str

    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)
