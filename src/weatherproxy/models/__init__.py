"""Weather API data models."""

from weatherproxy.models.weather import Condition, MainReadings, WeatherSnapshot

__all__ = [
    "Condition",
    "MainReadings",
    "WeatherSnapshot",
]
